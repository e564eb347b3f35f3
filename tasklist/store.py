"""Document-store primitives on top of a SQLAlchemy session.

Services never touch the session directly. They read and write through the
operations below, which mirror what a key/value document store offers:
point query, index query, scan, put, put-if-absent, update, delete and
atomic increment. Every operation is a single transaction. A failing
SQLAlchemy call is rolled back, logged and re-raised as ``StoreUnavailable``;
nothing here retries.
"""

import logging
from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from tasklist.errors import StoreUnavailable

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def store_operation(func: F) -> F:
    """Translate SQLAlchemy failures into StoreUnavailable."""

    @wraps(func)
    def wrapper(self: "DocumentStore", *args: Any, **kwargs: Any) -> Any:
        try:
            return func(self, *args, **kwargs)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Store operation {func.__name__} failed: {e}")
            raise StoreUnavailable(func.__name__) from e

    return wrapper  # type: ignore[return-value]


def _key_criteria(model: Any, key: dict[str, Any]) -> list[Any]:
    return [getattr(model, name) == value for name, value in key.items()]


class DocumentStore:
    """Item-level access to the ``users``, ``user_names``, ``tasks`` and ``counters`` tables."""

    def __init__(self, db: Session):
        self.db = db

    def item_key(self, item: Any) -> dict[str, Any]:
        """Primary key of an item as a dict.

        Uses the identity the session already holds, so it works on items whose
        row was deleted or whose attributes were expired by a commit.
        """
        state = inspect(item)
        names = [column.key for column in state.mapper.primary_key]
        if state.identity is not None:
            return dict(zip(names, state.identity))
        return {name: getattr(item, name) for name in names}

    @store_operation
    def get_item(self, model: Any, key: dict[str, Any]) -> Any | None:
        """Point query by full primary key."""
        return self.db.query(model).filter(*_key_criteria(model, key)).first()

    @store_operation
    def query(self, model: Any, **conditions: Any) -> list[Any]:
        """Equality query on indexed attributes."""
        return self.db.query(model).filter(*_key_criteria(model, conditions)).all()

    @store_operation
    def scan(self, model: Any, *criteria: Any) -> list[Any]:
        """Read every item of a table that matches the filter expression."""
        return self.db.query(model).filter(*criteria).all()

    @store_operation
    def put_item(self, item: Any) -> Any:
        """Write an item, replacing any with the same primary key."""
        stored = self.db.merge(item)
        self.db.commit()
        return stored

    @store_operation
    def put_new_items(self, *items: Any) -> bool:
        """Insert items only if none of their keys exist yet.

        Returns False, writing nothing, when any key is already taken.
        """
        self.db.add_all(items)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.info(f"Conditional put rejected: {e.orig}")
            return False
        return True

    @store_operation
    def update_item(self, model: Any, key: dict[str, Any], changes: dict[str, Any]) -> Any | None:
        """Overwrite attributes of one item and return its new state.

        Returns None when no item has the key.
        """
        rows = (
            self.db.query(model)
            .filter(*_key_criteria(model, key))
            .update(changes, synchronize_session=False)
        )
        self.db.commit()
        if rows == 0:
            return None
        item = self.db.query(model).filter(*_key_criteria(model, key)).first()
        if item is not None:
            self.db.refresh(item)
        return item

    @store_operation
    def delete_item(self, model: Any, key: dict[str, Any]) -> None:
        """Delete one item; a missing key is not an error."""
        self.db.query(model).filter(*_key_criteria(model, key)).delete(synchronize_session=False)
        self.db.commit()

    @store_operation
    def increment(self, model: Any, key: dict[str, Any], attribute: str, amount: int = 1) -> int:
        """Atomically add ``amount`` to a numeric attribute and return the new value.

        A missing item is created as if its attribute had been 0.
        """
        column = getattr(model, attribute)
        criteria = _key_criteria(model, key)

        rows = (
            self.db.query(model)
            .filter(*criteria)
            .update({column: column + amount}, synchronize_session=False)
        )
        if rows == 0:
            try:
                self.db.add(model(**key, **{attribute: amount}))
                self.db.flush()
            except IntegrityError:
                # Another caller created the item first
                self.db.rollback()
                self.db.query(model).filter(*criteria).update(
                    {column: column + amount}, synchronize_session=False
                )

        # Read back inside the same transaction, while the row is still locked
        value = self.db.query(column).filter(*criteria).scalar()
        self.db.commit()
        return int(value)
