"""Task schemas."""

from pydantic import BaseModel, ConfigDict, Field

from tasklist.models.enums import TaskStatus


class TaskCreate(BaseModel):
    """Create a new task.

    Fields are optional here so that missing or empty values reach the
    required-field check instead of failing request parsing.
    """

    title: str | None = Field(None, max_length=500)
    detail: str | None = None
    due_date: str | None = Field(None, max_length=64)


class TaskUpdate(TaskCreate):
    """Replace the mutable fields of a task."""

    statuses: list[TaskStatus] = Field(..., min_length=1)


class TaskResponse(BaseModel):
    """Task response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    detail: str
    due_date: str
    statuses: list[int]
    created_at: str
    updated_at: str
    user_id: int


class StatusResponse(BaseModel):
    """One entry of the status reference list."""

    label: str
    status_id: int
