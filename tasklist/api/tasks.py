"""Task API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from tasklist.api.dependencies import get_auth_gate, get_current_user, get_task_store
from tasklist.models.user import User
from tasklist.schemas.task import StatusResponse, TaskCreate, TaskResponse, TaskUpdate
from tasklist.schemas.user import MessageResponse
from tasklist.services.auth import AuthenticationGate, validate_task_fields
from tasklist.services.tasks import TaskStore, status_list

router = APIRouter(
    prefix="/api/v1",
    tags=["tasks"],
    responses={503: {"model": MessageResponse, "description": "Store unavailable"}},
)

AUTH_ERROR = {403: {"model": MessageResponse, "description": "Unknown access key or foreign task"}}
AUTH_OR_VALIDATION_ERROR = {
    **AUTH_ERROR,
    400: {"model": MessageResponse, "description": "Missing or invalid field"},
}


@router.get("/tasks", response_model=list[TaskResponse], responses=AUTH_ERROR)
def get_tasks(
    current_user: Annotated[User, Depends(get_current_user)],
    tasks: Annotated[TaskStore, Depends(get_task_store)],
):
    """Get all tasks of the current user."""
    return tasks.list_by_owner(current_user.id)


@router.get("/tasks/search", response_model=list[TaskResponse], responses=AUTH_ERROR)
def search_tasks(
    current_user: Annotated[User, Depends(get_current_user)],
    tasks: Annotated[TaskStore, Depends(get_task_store)],
    search_word: str = Query(default="", description="Substring of title or detail"),
    status_ids: list[int] = Query(default=[], description="Status codes to include"),
):
    """Search the current user's tasks by text and status.

    With no status_ids the result is empty.
    """
    return tasks.search(search_word, status_ids, current_user.id)


@router.get("/tasks/{task_id}", response_model=TaskResponse, responses=AUTH_ERROR)
def get_task(
    task_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    gate: Annotated[AuthenticationGate, Depends(get_auth_gate)],
):
    """Get a single task."""
    return gate.authorize_task(task_id, current_user)


@router.post(
    "/tasks",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    responses=AUTH_OR_VALIDATION_ERROR,
)
def create_task(
    task_data: TaskCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    tasks: Annotated[TaskStore, Depends(get_task_store)],
):
    """Create a new task."""
    validate_task_fields(task_data)
    return tasks.create(task_data, current_user.id)


@router.put("/tasks/{task_id}", response_model=TaskResponse, responses=AUTH_OR_VALIDATION_ERROR)
def update_task(
    task_id: int,
    task_data: TaskUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    gate: Annotated[AuthenticationGate, Depends(get_auth_gate)],
    tasks: Annotated[TaskStore, Depends(get_task_store)],
):
    """Replace the title, detail, due date and statuses of a task."""
    validate_task_fields(task_data)
    gate.authorize_task(task_id, current_user)
    return tasks.update(task_id, task_data, current_user.id)


@router.delete(
    "/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT, responses=AUTH_ERROR
)
def delete_task(
    task_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    gate: Annotated[AuthenticationGate, Depends(get_auth_gate)],
    tasks: Annotated[TaskStore, Depends(get_task_store)],
):
    """Delete a task permanently."""
    task = gate.authorize_task(task_id, current_user)
    tasks.delete(task)


@router.get("/statuses", response_model=list[StatusResponse])
def get_statuses():
    """Get the status reference list."""
    return status_list()
