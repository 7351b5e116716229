"""Seed script to populate the storage with the default dataset."""

from kosman.core.config import settings
from kosman.core.database import SessionLocal, init_db
from kosman.core.logging import configure_logging
from kosman.services.kos_store import KosStore
from kosman.services.storage import SqlKeyValueStore


def seed_database() -> None:
    """Seed storage keys that have never been written; existing keys are left alone."""
    configure_logging(settings.LOG_LEVEL)
    init_db()

    print(f"Initializing storage at {settings.DATABASE_URL}...")
    store = KosStore(SqlKeyValueStore(SessionLocal), settings)

    print(f"Properties:     {len(store.properties)}")
    print(f"Rooms:          {len(store.rooms)}")
    print(f"Tenants:        {len(store.tenants)}")
    print(f"Meter readings: {len(store.meter_readings)}")
    print(f"Bills:          {len(store.bills)}")
    print(
        f"Global tariff:  {store.settings.cost_per_kwh}/kWh, "
        f"trash {store.settings.trash_fee}, water {store.settings.water_fee}"
    )


if __name__ == "__main__":
    seed_database()
