"""User model."""

from sqlalchemy import Column, Integer, String

from biblioteca.database import Base
from biblioteca.models.mixins import EpochTimestampMixin, SoftDeleteMixin, epoch_now


class User(Base, EpochTimestampMixin, SoftDeleteMixin):
    """Registered library account."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)

    @classmethod
    def register(cls, name: str, email: str, password_hash: str) -> "User":
        """Build a new, not yet persisted, user."""
        return cls(
            name=name,
            email=email,
            password_hash=password_hash,
            created_at=epoch_now(),
            updated_at=None,
            deleted_at=None,
        )

    def mark_deleted(self, now: int | None = None) -> None:
        """Touch the record and flag it as deleted at the same instant."""
        now = now if now is not None else epoch_now()
        self.touch(now)
        self.soft_delete(now)

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r}>"
