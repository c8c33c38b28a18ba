"""User schemas."""

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """Create a new user."""

    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=1, max_length=255)
    password_hash: str = Field(..., min_length=1)


class UserUpdate(BaseModel):
    """Full user record submitted on update.

    password_hash may be left out, in which case the stored hash is kept.
    When is_deleted is true the request soft-deletes the user and the
    other fields are not written.
    """

    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=1, max_length=255)
    password_hash: str | None = Field(None, min_length=1)
    is_deleted: bool = False


class UserResponse(BaseModel):
    """User response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    created_at: int
    updated_at: int | None
    is_deleted: bool
    deleted_at: int | None
