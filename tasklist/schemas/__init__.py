"""Pydantic schemas for API requests and responses."""

from tasklist.schemas.task import StatusResponse, TaskCreate, TaskResponse, TaskUpdate
from tasklist.schemas.user import MessageResponse, UserCredentials, UserResponse

__all__ = [
    "UserCredentials",
    "UserResponse",
    "MessageResponse",
    "TaskCreate",
    "TaskUpdate",
    "TaskResponse",
    "StatusResponse",
]
