"""FastAPI dependencies for authentication and storage."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import APIKeyHeader
from sqlalchemy.orm import Session

from tasklist.database import get_db
from tasklist.models.user import User
from tasklist.services.auth import AuthenticationGate
from tasklist.services.sequences import SequenceAllocator
from tasklist.services.tasks import TaskStore
from tasklist.services.users import UserDirectory
from tasklist.store import DocumentStore

# A missing header reaches the gate as None and fails there like an unknown key
api_key_header = APIKeyHeader(name="apikey", auto_error=False)


def get_store(db: Annotated[Session, Depends(get_db)]) -> DocumentStore:
    """Get document store bound to the request's session."""
    return DocumentStore(db)


def get_sequences(store: Annotated[DocumentStore, Depends(get_store)]) -> SequenceAllocator:
    """Get id allocator."""
    return SequenceAllocator(store)


def get_user_directory(
    store: Annotated[DocumentStore, Depends(get_store)],
    sequences: Annotated[SequenceAllocator, Depends(get_sequences)],
) -> UserDirectory:
    """Get user directory with dependencies."""
    return UserDirectory(store, sequences)


def get_task_store(
    store: Annotated[DocumentStore, Depends(get_store)],
    sequences: Annotated[SequenceAllocator, Depends(get_sequences)],
) -> TaskStore:
    """Get task store with dependencies."""
    return TaskStore(store, sequences)


def get_auth_gate(
    users: Annotated[UserDirectory, Depends(get_user_directory)],
    tasks: Annotated[TaskStore, Depends(get_task_store)],
) -> AuthenticationGate:
    """Get authentication gate with dependencies."""
    return AuthenticationGate(users, tasks)


def get_current_user(
    access_key: Annotated[str | None, Depends(api_key_header)],
    gate: Annotated[AuthenticationGate, Depends(get_auth_gate)],
) -> User:
    """Get the user owning the access key sent in the ``apikey`` header."""
    return gate.authenticate_request(access_key)
