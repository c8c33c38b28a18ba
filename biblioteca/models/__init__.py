"""SQLAlchemy models."""

from biblioteca.models.user import User

__all__ = ["User"]
