"""Enums for model fields."""

from enum import IntEnum


class TaskStatus(IntEnum):
    """Status codes a task's status set is drawn from."""

    ACTIVE = 1
    DONE = 2

    @property
    def label(self) -> str:
        """Human-readable label shown in the status reference list."""
        return self.name.capitalize()
