"""Domain store for properties, rooms, tenants, meter readings and bills.

The store is the only writer of its collections. Records are frozen models
and collections are exposed as tuples, so callers cannot change state except
through the operations below. Every mutation writes the whole collection to
the key-value storage first and then swaps the in-memory copy; a failed write
leaves the store unchanged.
"""

import logging
import threading
from collections.abc import Callable
from datetime import datetime
from typing import Any

from pydantic import BaseModel

from kosman.core.config import Settings
from kosman.core.config import settings as app_settings
from kosman.core.exceptions import KosError, RoomNotFoundError
from kosman.schemas.bill import Bill, BillCreate, BillDraft
from kosman.schemas.meter_reading import MeterReading, MeterReadingCreate
from kosman.schemas.property import Property, PropertyCreate, PropertyUpdate
from kosman.schemas.room import Room, RoomCreate, RoomUpdate
from kosman.schemas.settings import GlobalSettings, GlobalSettingsUpdate, TariffBase
from kosman.schemas.tenant import Tenant, TenantCreate, TenantUpdate
from kosman.services import queries
from kosman.services.billing import (
    calculate_total_amount,
    calculate_usage_cost,
    default_additional_cost,
    effective_settings,
)
from kosman.services.ids import new_id, utc_now
from kosman.services.seed import default_dataset
from kosman.services.storage import (
    BILLS,
    METER_READINGS,
    PROPERTIES,
    ROOMS,
    SETTINGS,
    TENANTS,
    KeyValueStore,
    storage_key,
)

logger = logging.getLogger(__name__)

MAX_ID_ATTEMPTS = 100

RECORD_TYPES: dict[str, type[BaseModel]] = {
    PROPERTIES: Property,
    ROOMS: Room,
    BILLS: Bill,
    METER_READINGS: MeterReading,
    TENANTS: Tenant,
}


class _PaidUpdate(BaseModel):
    is_paid: bool


def _dump_records(records: tuple[BaseModel, ...]) -> list[dict[str, Any]]:
    return [r.model_dump(mode="json") for r in records]


class KosStore:
    """Holds all collections plus the global tariff and mirrors them to storage."""

    def __init__(
        self,
        storage: KeyValueStore,
        config: Settings = app_settings,
        id_factory: Callable[[], str] = new_id,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.storage = storage
        self.key_prefix = config.STORAGE_KEY_PREFIX
        self.id_factory = id_factory
        self.clock = clock
        # Serializes read-modify-commit; handlers may run in a threadpool
        self._lock = threading.RLock()

        defaults = default_dataset(config)
        self._collections: dict[str, tuple[Any, ...]] = {
            name: self._load_collection(name, defaults[name]) for name in RECORD_TYPES
        }
        self._settings = self._load_settings(defaults[SETTINGS])

    # --- Loading and saving ---

    def _load_collection(self, name: str, default: list[dict[str, Any]]) -> tuple[Any, ...]:
        key = storage_key(self.key_prefix, name)
        model = RECORD_TYPES[name]
        raw = self.storage.get(key)
        if raw is None:
            records = tuple(model.model_validate(item) for item in default)
            self.storage.set(key, _dump_records(records))
            logger.info("Seeded %s with %d records", key, len(records))
            return records
        records = tuple(model.model_validate(item) for item in raw)
        logger.debug("Loaded %d records from %s", len(records), key)
        return records

    def _load_settings(self, default: dict[str, Any]) -> GlobalSettings:
        key = storage_key(self.key_prefix, SETTINGS)
        raw = self.storage.get(key)
        if raw is None:
            loaded = GlobalSettings.model_validate(default)
            self.storage.set(key, loaded.model_dump(mode="json"))
            logger.info("Seeded %s", key)
            return loaded
        return GlobalSettings.model_validate(raw)

    def _commit(self, name: str, records: tuple[Any, ...]) -> None:
        self.storage.set(storage_key(self.key_prefix, name), _dump_records(records))
        self._collections[name] = records

    def _fresh_id(self, name: str) -> str:
        taken = {r.id for r in self._collections[name]}
        for _ in range(MAX_ID_ATTEMPTS):
            candidate = self.id_factory()
            if candidate and candidate not in taken:
                return candidate
        raise KosError(f"Could not allocate a unique id for {name}")

    # --- Generic record operations ---

    def _add(self, name: str, data: BaseModel, at_front: bool = False, **extra: Any) -> Any:
        model = RECORD_TYPES[name]
        with self._lock:
            record = model.model_validate({**data.model_dump(), **extra, "id": self._fresh_id(name)})
            current = self._collections[name]
            self._commit(name, (record, *current) if at_front else (*current, record))
        logger.debug("Added %s %s", name, record.id)
        return record

    def _update(self, name: str, record_id: str, updates: BaseModel) -> Any | None:
        changes = updates.model_dump(exclude_unset=True)
        with self._lock:
            current = self._collections[name]
            for index, record in enumerate(current):
                if record.id == record_id:
                    break
            else:
                return None

            updated = type(record).model_validate({**record.model_dump(), **changes})
            self._commit(name, (*current[:index], updated, *current[index + 1 :]))
        logger.debug("Updated %s %s: %s", name, record_id, sorted(changes))
        return updated

    def _delete(self, name: str, record_id: str) -> bool:
        with self._lock:
            current = self._collections[name]
            remaining = tuple(r for r in current if r.id != record_id)
            if len(remaining) == len(current):
                return False
            self._commit(name, remaining)
        logger.info("Deleted %s %s", name, record_id)
        return True

    # --- State ---

    @property
    def properties(self) -> tuple[Property, ...]:
        return self._collections[PROPERTIES]

    @property
    def rooms(self) -> tuple[Room, ...]:
        return self._collections[ROOMS]

    @property
    def bills(self) -> tuple[Bill, ...]:
        return self._collections[BILLS]

    @property
    def meter_readings(self) -> tuple[MeterReading, ...]:
        return self._collections[METER_READINGS]

    @property
    def tenants(self) -> tuple[Tenant, ...]:
        return self._collections[TENANTS]

    @property
    def settings(self) -> GlobalSettings:
        return self._settings

    # --- Settings ---

    def update_settings(self, updates: GlobalSettingsUpdate) -> GlobalSettings:
        """Merge the given fields into the global tariff."""
        with self._lock:
            merged = GlobalSettings.model_validate(
                {**self._settings.model_dump(), **updates.model_dump(exclude_none=True)}
            )
            self.storage.set(storage_key(self.key_prefix, SETTINGS), merged.model_dump(mode="json"))
            self._settings = merged
        return merged

    # --- Properties ---

    def add_property(self, data: PropertyCreate) -> Property:
        return self._add(PROPERTIES, data)

    def update_property(self, property_id: str, updates: PropertyUpdate) -> Property | None:
        return self._update(PROPERTIES, property_id, updates)

    def delete_property(self, property_id: str) -> bool:
        """Delete a property and its rooms.

        Bills, meter readings and tenants of those rooms are left in place.
        An unknown property id changes nothing, even when rooms point at it.
        Rooms are written first; if the property write then fails, the rooms
        are written back so storage and memory stay as they were.
        """
        with self._lock:
            properties = self.properties
            remaining_properties = tuple(p for p in properties if p.id != property_id)
            if len(remaining_properties) == len(properties):
                return False

            rooms = self.rooms
            remaining_rooms = tuple(r for r in rooms if r.property_id != property_id)
            rooms_key = storage_key(self.key_prefix, ROOMS)
            self.storage.set(rooms_key, _dump_records(remaining_rooms))
            try:
                self.storage.set(
                    storage_key(self.key_prefix, PROPERTIES), _dump_records(remaining_properties)
                )
            except Exception:
                self.storage.set(rooms_key, _dump_records(rooms))
                raise
            self._collections[ROOMS] = remaining_rooms
            self._collections[PROPERTIES] = remaining_properties

        logger.info(
            "Deleted property %s with %d rooms", property_id, len(rooms) - len(remaining_rooms)
        )
        return True

    # --- Rooms ---

    def add_room(self, data: RoomCreate) -> Room:
        return self._add(ROOMS, data)

    def update_room(self, room_id: str, updates: RoomUpdate) -> Room | None:
        return self._update(ROOMS, room_id, updates)

    def delete_room(self, room_id: str) -> bool:
        return self._delete(ROOMS, room_id)

    # --- Tenants ---

    def add_tenant(self, data: TenantCreate) -> Tenant:
        return self._add(TENANTS, data)

    def update_tenant(self, tenant_id: str, updates: TenantUpdate) -> Tenant | None:
        return self._update(TENANTS, tenant_id, updates)

    def delete_tenant(self, tenant_id: str) -> bool:
        return self._delete(TENANTS, tenant_id)

    # --- Meter readings ---

    def add_meter_reading(self, data: MeterReadingCreate) -> MeterReading:
        """Record a reading at the front of the collection, stamped with the current time."""
        return self._add(METER_READINGS, data, at_front=True, recorded_at=self.clock())

    def delete_meter_reading(self, reading_id: str) -> bool:
        return self._delete(METER_READINGS, reading_id)

    # --- Billing ---

    def generate_bill(self, data: BillCreate) -> Bill:
        """
        Generate an unpaid bill for a room and put it at the front of the bills.

        Args:
            data: Room, period, meter values, rate and additional cost

        Returns:
            The new bill

        Raises:
            RoomNotFoundError: If the room does not exist

        """
        with self._lock:
            room = self.get_room_by_id(data.room_id)
            if room is None:
                logger.warning("Cannot generate bill: room %s not found", data.room_id)
                raise RoomNotFoundError(data.room_id)

            usage_cost = calculate_usage_cost(data.meter_start, data.meter_end, data.cost_per_kwh)
            bill = Bill(
                id=self._fresh_id(BILLS),
                room_id=data.room_id,
                period=data.period,
                meter_start=data.meter_start,
                meter_end=data.meter_end,
                cost_per_kwh=data.cost_per_kwh,
                usage_cost=usage_cost,
                additional_cost=data.additional_cost,
                total_amount=calculate_total_amount(room.price, usage_cost, data.additional_cost),
                is_paid=False,
                generated_at=self.clock(),
            )
            self._commit(BILLS, (bill, *self.bills))
        logger.info("Generated bill %s for room %s, period %s", bill.id, bill.room_id, bill.period)
        return bill

    def mark_bill_as_paid(self, bill_id: str) -> Bill | None:
        with self._lock:
            bill = self.get_bill_by_id(bill_id)
            if bill is None or bill.is_paid:
                return bill
            return self._update(BILLS, bill_id, _PaidUpdate(is_paid=True))

    def delete_bill(self, bill_id: str) -> bool:
        return self._delete(BILLS, bill_id)

    def draft_bill(self, room_id: str, period: str) -> BillDraft:
        """
        Pre-fill bill inputs for a room and period.

        Uses the most recently recorded reading for the period, the effective
        tariff of the room's property, and water plus trash fees as the
        additional cost.

        Raises:
            RoomNotFoundError: If the room does not exist

        """
        room = self.get_room_by_id(room_id)
        if room is None:
            raise RoomNotFoundError(room_id)

        tariff = self.effective_settings_for(room.property_id)
        readings = [r for r in self.get_meter_readings_by_room_id(room_id) if r.period == period]
        reading = max(readings, key=lambda r: r.recorded_at) if readings else None
        return BillDraft(
            room_id=room_id,
            period=period,
            room_price=room.price,
            meter_start=reading.meter_start if reading else None,
            meter_end=reading.meter_end if reading else None,
            cost_per_kwh=tariff.cost_per_kwh,
            additional_cost=default_additional_cost(room, tariff),
        )

    # --- Lookups ---

    def get_property_by_id(self, property_id: str) -> Property | None:
        return queries.get_property_by_id(self.properties, property_id)

    def get_room_by_id(self, room_id: str) -> Room | None:
        return queries.get_room_by_id(self.rooms, room_id)

    def get_tenant_by_id(self, tenant_id: str) -> Tenant | None:
        return queries.get_tenant_by_id(self.tenants, tenant_id)

    def get_bill_by_id(self, bill_id: str) -> Bill | None:
        return queries.get_bill_by_id(self.bills, bill_id)

    def get_rooms_by_property_id(self, property_id: str) -> list[Room]:
        return queries.get_rooms_by_property_id(self.rooms, property_id)

    def get_bills_by_room_id(self, room_id: str) -> list[Bill]:
        return queries.get_bills_by_room_id(self.bills, room_id)

    def get_meter_readings_by_room_id(self, room_id: str) -> list[MeterReading]:
        return queries.get_meter_readings_by_room_id(self.meter_readings, room_id)

    def effective_settings_for(self, property_id: str) -> TariffBase:
        return effective_settings(self.get_property_by_id(property_id), self._settings)

