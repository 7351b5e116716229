"""Database engine and session factory for the key-value storage table."""

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from kosman.core.config import settings

engine = create_engine(
    settings.DATABASE_URL,
    connect_args={"check_same_thread": False},  # Needed for SQLite
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class Base(DeclarativeBase):
    """Base class for all database models."""

    pass


def init_db(bind: Engine = engine) -> None:
    """Create the storage table if it does not exist yet."""
    # Registers StorageEntry on Base.metadata
    from kosman.models import storage_entry  # noqa: F401

    Base.metadata.create_all(bind=bind)
