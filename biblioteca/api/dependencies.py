"""FastAPI dependencies for database-backed services."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from biblioteca.database import get_db
from biblioteca.services.users import UserRepository


def get_user_repository(
    db: Annotated[Session, Depends(get_db)],
) -> UserRepository:
    """Get user repository bound to the request's session."""
    return UserRepository(db)
