"""SQLAlchemy models."""

from tasklist.models.counter import Counter
from tasklist.models.enums import TaskStatus
from tasklist.models.task import Task
from tasklist.models.user import User, UserNameClaim

__all__ = [
    "Counter",
    "Task",
    "TaskStatus",
    "User",
    "UserNameClaim",
]
