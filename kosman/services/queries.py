"""Read-only lookups over the store's collections.

Every function takes the collection it reads as an argument and returns
a fresh result; nothing is cached.
"""

from collections.abc import Iterable

from kosman.schemas.bill import Bill
from kosman.schemas.meter_reading import MeterReading
from kosman.schemas.period import period_sort_key
from kosman.schemas.property import Property
from kosman.schemas.room import Room
from kosman.schemas.tenant import Tenant


def get_property_by_id(properties: Iterable[Property], property_id: str) -> Property | None:
    return next((p for p in properties if p.id == property_id), None)


def get_room_by_id(rooms: Iterable[Room], room_id: str) -> Room | None:
    return next((r for r in rooms if r.id == room_id), None)


def get_tenant_by_id(tenants: Iterable[Tenant], tenant_id: str) -> Tenant | None:
    return next((t for t in tenants if t.id == tenant_id), None)


def get_bill_by_id(bills: Iterable[Bill], bill_id: str) -> Bill | None:
    return next((b for b in bills if b.id == bill_id), None)


def get_rooms_by_property_id(rooms: Iterable[Room], property_id: str) -> list[Room]:
    """Rooms of a property, in collection order."""
    return [r for r in rooms if r.property_id == property_id]


def get_bills_by_room_id(bills: Iterable[Bill], room_id: str) -> list[Bill]:
    """Bills of a room, in collection order."""
    return [b for b in bills if b.room_id == room_id]


def get_meter_readings_by_room_id(
    readings: Iterable[MeterReading], room_id: str
) -> list[MeterReading]:
    """Readings of a room, newest period first.

    Readings sharing a period keep their collection order.
    """
    matching = [r for r in readings if r.room_id == room_id]
    return sorted(matching, key=lambda r: period_sort_key(r.period), reverse=True)
