"""Mixins for SQLAlchemy models."""

import time

from sqlalchemy import BigInteger, Column


def epoch_now() -> int:
    """Current time as Unix epoch seconds."""
    return int(time.time())


class EpochTimestampMixin:
    """Mixin to add created_at and updated_at columns stored as epoch seconds."""

    created_at = Column(BigInteger, nullable=False, default=epoch_now)
    updated_at = Column(BigInteger, nullable=True)

    def touch(self, now: int | None = None) -> None:
        """Record a mutating update."""
        self.updated_at = now if now is not None else epoch_now()


class SoftDeleteMixin:
    """Mixin to add soft delete functionality.

    There is no restore: once deleted_at is set it stays set.
    """

    deleted_at = Column(BigInteger, nullable=True)

    @property
    def is_deleted(self) -> bool:
        """Check if the record is soft-deleted."""
        return self.deleted_at is not None

    def soft_delete(self, now: int | None = None) -> None:
        """Soft delete the record, keeping the first deletion time."""
        if self.deleted_at is None:
            self.deleted_at = now if now is not None else epoch_now()
