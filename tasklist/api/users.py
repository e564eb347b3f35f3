"""User API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from tasklist.api.dependencies import get_current_user, get_user_directory
from tasklist.models.user import User
from tasklist.schemas.user import MessageResponse, UserCredentials, UserResponse
from tasklist.services.users import UserDirectory

router = APIRouter(
    prefix="/api/v1/users",
    tags=["users"],
    responses={503: {"model": MessageResponse, "description": "Store unavailable"}},
)


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": MessageResponse, "description": "User name taken"}},
)
def create_user(
    user_data: UserCredentials,
    users: Annotated[UserDirectory, Depends(get_user_directory)],
):
    """Sign up. The response carries the access key for later requests."""
    return users.create_user(user_data.user_name, user_data.password)


@router.post(
    "/signin",
    response_model=UserResponse,
    responses={403: {"model": MessageResponse, "description": "Wrong user name or password"}},
)
def signin(
    credentials: UserCredentials,
    users: Annotated[UserDirectory, Depends(get_user_directory)],
):
    """Sign in with user name and password."""
    return users.authenticate(credentials.user_name, credentials.password)


@router.get(
    "/me",
    response_model=UserResponse,
    responses={403: {"model": MessageResponse, "description": "Unknown access key"}},
)
def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get the user owning the access key."""
    return current_user
