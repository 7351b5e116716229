"""Durable key-value storage backing the domain store."""

from abc import ABC, abstractmethod
from typing import Any

from sqlalchemy.orm import Session, sessionmaker

from kosman.models.storage_entry import StorageEntry

# Collection names, each persisted under "<prefix>-<name>"
PROPERTIES = "properties"
ROOMS = "rooms"
BILLS = "bills"
METER_READINGS = "meter-readings"
TENANTS = "tenants"
SETTINGS = "settings"


def storage_key(prefix: str, collection: str) -> str:
    """Build the namespaced storage key for a collection."""
    return f"{prefix}-{collection}"


class KeyValueStore(ABC):
    """Minimal get/set surface holding JSON-compatible values."""

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Return the value stored under key, or default."""

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Replace the value stored under key."""


class MemoryKeyValueStore(KeyValueStore):
    """Dict-backed storage; nothing survives the process."""

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self.data: dict[str, Any] = dict(initial or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.data[key] = value


class SqlKeyValueStore(KeyValueStore):
    """Storage over the `storage_entries` table.

    Each call uses its own short-lived session. Database errors are not
    caught here and reach the caller.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self.session_factory = session_factory

    def get(self, key: str, default: Any = None) -> Any:
        with self.session_factory() as db:
            entry = db.get(StorageEntry, key)
            if entry is None:
                return default
            return entry.value

    def set(self, key: str, value: Any) -> None:
        with self.session_factory() as db:
            entry = db.get(StorageEntry, key)
            if entry is None:
                db.add(StorageEntry(key=key, value=value))
            else:
                entry.value = value
            db.commit()
