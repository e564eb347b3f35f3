"""Failures raised by the data-access and identity layer.

Every failure carries the HTTP status the API answers with and a
human-readable message. The API registers a single exception handler for
``TaskListError``, so none of these ever reaches the client as a 500.
"""

from fastapi import status


class TaskListError(Exception):
    """Base class for all expected failures."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(TaskListError):
    """A task or user does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class AuthFailure(TaskListError):
    """Bad access key, bad credential pair, or a task the caller may not touch."""

    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, subject: str, message: str | None = None):
        super().__init__(message or f"{subject} authentication error")
        self.subject = subject


class OwnershipViolation(AuthFailure):
    """The task exists but belongs to another user."""

    def __init__(self, task_id: int):
        super().__init__("Todo")
        self.task_id = task_id


class ValidationFailure(TaskListError):
    """A required task field is missing or malformed."""

    status_code = status.HTTP_400_BAD_REQUEST


class DuplicateUser(TaskListError):
    """The requested user name is already taken."""

    status_code = status.HTTP_409_CONFLICT

    def __init__(self, user_name: str):
        super().__init__(f"User name '{user_name}' is already in use")
        self.user_name = user_name


class StoreUnavailable(TaskListError):
    """The underlying document store call failed."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    def __init__(self, operation: str):
        super().__init__(f"Store unavailable during {operation}")
        self.operation = operation
