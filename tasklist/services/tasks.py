"""Task storage scoped to an owning user."""

import logging
from collections.abc import Iterable
from typing import Any

from tasklist.errors import NotFound, OwnershipViolation, ValidationFailure
from tasklist.models.enums import TaskStatus
from tasklist.models.task import Task
from tasklist.services.dates import normalize_due_date, now_timestamp
from tasklist.services.sequences import TASKS, SequenceAllocator
from tasklist.store import DocumentStore

logger = logging.getLogger(__name__)


def status_list() -> list[dict[str, Any]]:
    """Static reference list of every task status."""
    return [{"label": s.label, "status_id": s.value} for s in TaskStatus]


def normalize_statuses(statuses: Iterable[int]) -> list[int]:
    """Deduplicate and sort a status set, rejecting empty or unknown codes."""
    try:
        codes = sorted({TaskStatus(int(s)).value for s in statuses})
    except ValueError as e:
        raise ValidationFailure(f"Unknown status in {statuses!r}") from e
    if not codes:
        raise ValidationFailure("A task needs at least one status")
    return codes


class TaskStore:
    """Create, read, update, delete and search tasks.

    Ownership is checked by the caller before mutating calls; this class only
    guarantees that the owner of a stored task never changes.
    """

    def __init__(self, store: DocumentStore, sequences: SequenceAllocator):
        self.store = store
        self.sequences = sequences

    def get(self, task_id: int) -> Task | None:
        tasks = self.store.query(Task, id=task_id)
        return tasks[0] if tasks else None

    def list_by_owner(self, user_id: int) -> list[Task]:
        return self.store.query(Task, user_id=user_id)

    def create(self, fields: Any, owner_id: int) -> Task:
        """Store a new task with status {Active} and identical timestamps."""
        # Parse before allocating so a bad date does not burn an id
        due_date = normalize_due_date(fields.due_date)
        task_id = self.sequences.next_id(TASKS)
        now = now_timestamp()

        task = self.store.put_item(
            Task(
                id=task_id,
                title=fields.title,
                detail=fields.detail,
                due_date=due_date,
                statuses=[TaskStatus.ACTIVE.value],
                created_at=now,
                updated_at=now,
                user_id=owner_id,
            )
        )
        logger.info(f"User {owner_id} created task {task_id}")
        return task

    def update(self, task_id: int, fields: Any, owner_id: int) -> Task:
        """Replace title, detail, due date and status set of a task.

        The id, owner and created timestamp are left alone; updated_at never
        moves backwards.
        """
        current = self.get(task_id)
        if current is None:
            raise NotFound(f"Task {task_id} not found")
        if current.user_id != owner_id:
            raise OwnershipViolation(task_id)

        changes = {
            "title": fields.title,
            "detail": fields.detail,
            "due_date": normalize_due_date(fields.due_date),
            "statuses": normalize_statuses(fields.statuses),
            "updated_at": max(now_timestamp(), current.updated_at),
        }
        task = self.store.update_item(
            Task, {"id": task_id, "created_at": current.created_at}, changes
        )
        if task is None:
            # Deleted between the read and the write
            raise NotFound(f"Task {task_id} not found")

        logger.info(f"User {owner_id} updated task {task_id}")
        return task

    def delete(self, task: Task) -> None:
        key = self.store.item_key(task)
        self.store.delete_item(Task, key)
        logger.info(f"Deleted task {key['id']}")

    def search(self, term: str, status_ids: Iterable[int], owner_id: int) -> list[Task]:
        """Owner's tasks whose title or detail contains ``term`` and whose
        status set shares at least one code with ``status_ids``.

        Matching is case-sensitive. An empty status filter matches nothing.
        """
        wanted = {int(s) for s in status_ids}
        if not wanted:
            return []

        candidates = self.store.scan(Task, Task.user_id == owner_id)
        return [
            task
            for task in candidates
            if (term in task.title or term in task.detail) and wanted.intersection(task.statuses)
        ]

    def status_list(self) -> list[dict[str, Any]]:
        return status_list()
