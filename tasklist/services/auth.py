"""Request authentication and task ownership checks.

These run before any mutating call; the storage classes assume they have.
"""

from typing import Any

from tasklist.errors import AuthFailure, OwnershipViolation, ValidationFailure
from tasklist.models.task import Task
from tasklist.models.user import User
from tasklist.services.tasks import TaskStore
from tasklist.services.users import UserDirectory

REQUIRED_TASK_FIELDS = ("title", "detail", "due_date")


def validate_task_fields(task: Any) -> None:
    """Reject a task whose title, detail or due date is missing or empty."""
    missing = [name for name in REQUIRED_TASK_FIELDS if not getattr(task, name, None)]
    if missing:
        raise ValidationFailure(f"Please check the required fields: {', '.join(missing)}")


class AuthenticationGate:
    """Resolves access keys to users and task ids to tasks the user owns."""

    def __init__(self, users: UserDirectory, tasks: TaskStore):
        self.users = users
        self.tasks = tasks

    def authenticate_request(self, access_key: str | None) -> User:
        if not isinstance(access_key, str) or not access_key:
            raise AuthFailure("User")
        user = self.users.find_by_access_key(access_key)
        if user is None:
            raise AuthFailure("User")
        return user

    def authorize_task(self, task_id: int, user: User) -> Task:
        """Return the task if ``user`` owns it.

        A missing task is reported the same way as someone else's, so callers
        cannot probe for ids they do not own.
        """
        task = self.tasks.get(task_id)
        if task is None:
            raise AuthFailure("Todo")
        if task.user_id != user.id:
            raise OwnershipViolation(task_id)
        return task
