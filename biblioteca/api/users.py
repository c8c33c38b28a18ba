"""User API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

from biblioteca.api.dependencies import get_user_repository
from biblioteca.models.mixins import epoch_now
from biblioteca.models.user import User
from biblioteca.schemas.common import ErrorResponse, MessageResponse
from biblioteca.schemas.user import UserCreate, UserResponse, UserUpdate
from biblioteca.services.security import get_password_hash
from biblioteca.services.users import EmailAlreadyRegistered, UserNotFound, UserRepository
from biblioteca.services.validation import is_valid_email, is_valid_password

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])

Repository = Annotated[UserRepository, Depends(get_user_repository)]

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


def store_failure(message: str) -> HTTPException:
    """Generic 500 for a failed store operation; details stay in the log."""
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message)


def hash_password(password: str) -> str:
    """Hash a submitted password. Values bcrypt refuses (NUL bytes) are a 400."""
    try:
        return get_password_hash(password)
    except ValueError as e:
        logger.warning(f"Rejected unhashable password: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid password"
        ) from None


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
)
def create_user(user_data: UserCreate, repository: Repository):
    """Create a new user."""
    if not is_valid_email(user_data.email):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid email address")

    if not is_valid_password(user_data.password_hash):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid password")

    try:
        exists = repository.email_exists(user_data.email)
    except SQLAlchemyError as e:
        logger.error(f"Failed to check email {user_data.email}: {e}")
        raise store_failure("Failed to verify email") from None

    if exists:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email already registered")

    user = User.register(
        name=user_data.name,
        email=user_data.email,
        password_hash=hash_password(user_data.password_hash),
    )
    try:
        return repository.insert(user)
    except EmailAlreadyRegistered:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Email already registered"
        ) from None
    except SQLAlchemyError as e:
        logger.error(f"Failed to create user {user_data.email}: {e}")
        raise store_failure("Failed to create user") from None


@router.get("", response_model=list[UserResponse], responses=ERROR_RESPONSES)
def list_users(repository: Repository):
    """List all users, including soft-deleted ones."""
    try:
        users = repository.find_all()
    except SQLAlchemyError as e:
        logger.error(f"Failed to list users: {e}")
        raise store_failure("Failed to list users") from None

    logger.info(f"Found {len(users)} users")
    return users


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses={**ERROR_RESPONSES, status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
def get_user(user_id: int, repository: Repository):
    """Get a user by id."""
    try:
        return repository.find_by_id(user_id)
    except UserNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found") from None
    except SQLAlchemyError as e:
        logger.error(f"Failed to fetch user {user_id}: {e}")
        raise store_failure("Failed to fetch user") from None


@router.put(
    "/{user_id}",
    response_model=UserResponse | MessageResponse,
    responses={**ERROR_RESPONSES, status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
def update_user(user_id: int, user_data: UserUpdate, repository: Repository):
    """Update a user, or soft delete it when the body sets is_deleted."""
    if user_data.is_deleted:
        return soft_delete_user(user_id, repository)

    password_hash = None
    if user_data.password_hash is not None:
        password_hash = hash_password(user_data.password_hash)

    try:
        rows = repository.update(
            user_id,
            name=user_data.name,
            email=user_data.email,
            password_hash=password_hash,
            timestamp=epoch_now(),
        )
    except EmailAlreadyRegistered:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Email already registered"
        ) from None
    except SQLAlchemyError as e:
        logger.error(f"Failed to update user {user_id}: {e}")
        raise store_failure("Failed to update user") from None

    if rows == 0:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    try:
        return UserResponse.model_validate(repository.find_by_id(user_id))
    except UserNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found") from None
    except SQLAlchemyError as e:
        logger.error(f"Failed to reload user {user_id}: {e}")
        raise store_failure("Failed to update user") from None


def soft_delete_user(user_id: int, repository: UserRepository) -> MessageResponse:
    """Flag a user as deleted without removing the row."""
    marker = User()
    marker.mark_deleted()

    try:
        repository.soft_delete(user_id, marker.deleted_at)
    except SQLAlchemyError as e:
        logger.error(f"Failed to soft delete user {user_id}: {e}")
        raise store_failure("Failed to delete user") from None

    return MessageResponse(message="User deleted successfully")


@router.delete("/{user_id}", response_model=MessageResponse, responses=ERROR_RESPONSES)
def delete_user(user_id: int, repository: Repository):
    """Permanently remove a user. Succeeds even if the user does not exist."""
    try:
        repository.hard_delete(user_id)
    except SQLAlchemyError as e:
        logger.error(f"Failed to delete user {user_id}: {e}")
        raise store_failure("Failed to delete user") from None

    return MessageResponse(message="User deleted successfully")
