"""Bill arithmetic and tariff resolution."""

from decimal import Decimal

from kosman.schemas.property import Property
from kosman.schemas.room import Room
from kosman.schemas.settings import GlobalSettings, TariffBase


def effective_settings(
    property_obj: Property | None,
    global_settings: GlobalSettings,
) -> TariffBase:
    """Resolve the tariff for a property.

    A property override replaces the global tariff as a whole; fields are
    never mixed between the two.
    """
    if property_obj is not None and property_obj.settings is not None:
        return property_obj.settings
    return global_settings


def calculate_usage_cost(
    meter_start: Decimal,
    meter_end: Decimal,
    cost_per_kwh: Decimal,
) -> Decimal:
    """Electricity cost: (meter_end - meter_start) * cost_per_kwh.

    A meter_end below meter_start gives a negative cost; it is not rejected.
    """
    return (meter_end - meter_start) * cost_per_kwh


def calculate_total_amount(
    room_price: Decimal,
    usage_cost: Decimal,
    additional_cost: Decimal,
) -> Decimal:
    """Total = room price + electricity usage + additional fees."""
    return room_price + usage_cost + additional_cost


def default_additional_cost(room: Room, tariff: TariffBase) -> Decimal:
    """Monthly flat fees for a room: water, plus trash unless the room opted out."""
    cost = tariff.water_fee
    if room.use_trash_service is not False:
        cost += tariff.trash_fee
    return cost
