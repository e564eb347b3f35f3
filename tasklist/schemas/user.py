"""User schemas."""

from pydantic import BaseModel, ConfigDict, Field


class UserCredentials(BaseModel):
    """Sign-up and sign-in request."""

    user_name: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=255)


class UserResponse(BaseModel):
    """User information response, including the key used to authenticate requests."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_name: str
    access_key: str


class MessageResponse(BaseModel):
    """Error body returned for every handled failure."""

    message: str
