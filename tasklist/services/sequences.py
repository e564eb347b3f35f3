"""Id allocation shared by every entity kind."""

import logging

from tasklist.models.counter import Counter
from tasklist.store import DocumentStore

logger = logging.getLogger(__name__)

USERS = "users"
TASKS = "tasks"


class SequenceAllocator:
    """Issues strictly increasing ids per entity kind from the ``counters`` table."""

    def __init__(self, store: DocumentStore):
        self.store = store

    def next_id(self, kind: str) -> int:
        """Return the next id for ``kind``; the first id of a new kind is 1."""
        value = self.store.increment(Counter, {"kind": kind}, "current_number")
        logger.debug(f"Allocated {kind} id {value}")
        return value
