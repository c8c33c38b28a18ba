"""Engine, sessions and schema creation for the users store."""

from collections.abc import Generator
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from biblioteca.config import get_settings

settings = get_settings()

Base: Any = declarative_base()


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine for PostgreSQL, or for SQLite in local runs and tests.

    SQLite connections are shared with the threadpool FastAPI runs sync
    endpoints in, so the same-thread check is disabled and no pool sizing
    applies.
    """
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url, echo=echo, connect_args={"check_same_thread": False}
        )
    return create_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
    )


engine = build_engine(settings.database_url, echo=settings.db_echo)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Dependency that provides a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine | None = None) -> None:
    """Create any missing tables on `bind`, defaulting to the app engine.

    Alembic owns the schema in deployed environments.
    """
    # Models register themselves on Base.metadata when imported
    from biblioteca import models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
