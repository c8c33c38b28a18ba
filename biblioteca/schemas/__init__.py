"""Pydantic schemas for API requests and responses."""

from biblioteca.schemas.common import ErrorResponse, MessageResponse
from biblioteca.schemas.user import UserCreate, UserResponse, UserUpdate

__all__ = [
    "ErrorResponse",
    "MessageResponse",
    "UserCreate",
    "UserUpdate",
    "UserResponse",
]
