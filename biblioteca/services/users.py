"""User persistence operations."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from biblioteca.models.user import User

logger = logging.getLogger(__name__)


class UserError(Exception):
    """Base class for user lifecycle errors."""


class UserNotFound(UserError):
    """No user row matches the requested id."""

    def __init__(self, user_id: int):
        super().__init__(f"User {user_id} not found")
        self.user_id = user_id


class EmailAlreadyRegistered(UserError):
    """Another user already owns the email address."""

    def __init__(self, email: str):
        super().__init__(f"Email {email} already registered")
        self.email = email


class UserRepository:
    """Reads and writes users through an injected database session.

    Store errors other than the ones mapped to UserError subclasses are
    left to propagate as SQLAlchemyError.
    """

    def __init__(self, db: Session):
        self.db = db

    def email_exists(self, email: str) -> bool:
        """Check whether any user, deleted or not, owns this exact email."""
        row = self.db.query(User.id).filter(User.email == email).first()
        return row is not None

    def insert(self, user: User) -> User:
        """Persist a new user and return it with its assigned id."""
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise EmailAlreadyRegistered(user.email) from None
        self.db.refresh(user)
        logger.info(f"Created user {user.id}")
        return user

    def find_all(self) -> list[User]:
        """Return every user, including soft-deleted ones."""
        return self.db.query(User).order_by(User.id).all()

    def find_by_id(self, user_id: int) -> User:
        """Return the user with this id or raise UserNotFound."""
        user = self.db.query(User).filter(User.id == user_id).first()
        if user is None:
            raise UserNotFound(user_id)
        return user

    def update(
        self,
        user_id: int,
        name: str,
        email: str,
        password_hash: str | None,
        timestamp: int,
    ) -> int:
        """Overwrite the editable fields and return the number of rows changed.

        A password_hash of None keeps the stored hash.
        """
        values = {User.name: name, User.email: email, User.updated_at: timestamp}
        if password_hash is not None:
            values[User.password_hash] = password_hash

        try:
            rows = (
                self.db.query(User)
                .filter(User.id == user_id)
                .update(values, synchronize_session=False)
            )
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise EmailAlreadyRegistered(email) from None
        return rows

    def soft_delete(self, user_id: int, timestamp: int) -> int:
        """Set deleted_at on a user that is not deleted yet."""
        rows = (
            self.db.query(User)
            .filter(User.id == user_id, User.deleted_at.is_(None))
            .update({User.deleted_at: timestamp}, synchronize_session=False)
        )
        self.db.commit()
        if rows:
            logger.info(f"Soft-deleted user {user_id} at {timestamp}")
        return rows

    def hard_delete(self, user_id: int) -> int:
        """Remove the user row. Deleting a missing id is not an error."""
        rows = (
            self.db.query(User)
            .filter(User.id == user_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        logger.info(f"Hard delete of user {user_id} removed {rows} row(s)")
        return rows
