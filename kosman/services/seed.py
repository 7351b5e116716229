"""Default dataset written to storage the first time a key is read."""

from decimal import Decimal
from typing import Any

from kosman.core.config import Settings
from kosman.services.storage import BILLS, METER_READINGS, PROPERTIES, ROOMS, SETTINGS, TENANTS


def default_settings(config: Settings) -> dict[str, Any]:
    """Global tariff from configuration."""
    return {
        "cost_per_kwh": config.DEFAULT_COST_PER_KWH,
        "trash_fee": config.DEFAULT_TRASH_FEE,
        "water_fee": config.DEFAULT_WATER_FEE,
    }


def demo_properties() -> list[dict[str, Any]]:
    return [
        {
            "id": "1",
            "name": "Kos Sejahtera 1",
            "address": "Jl. Merdeka No. 10, Jakarta Selatan",
            "description": "Kos nyaman dengan fasilitas lengkap, dekat stasiun MRT.",
            "image": "https://images.unsplash.com/photo-1522708323590-d24dbb6b0267?auto=format&fit=crop&w=2340&q=80",
        },
        {
            "id": "2",
            "name": "Kos Bahagia 2",
            "address": "Jl. Anggrek No. 5, Bandung",
            "description": "Lingkungan asri dan sejuk, cocok untuk mahasiswa.",
            "image": "https://images.unsplash.com/photo-1502672260266-1c1ef2d93688?auto=format&fit=crop&w=2340&q=80",
            "settings": {
                "cost_per_kwh": Decimal("2000"),
                "trash_fee": Decimal("30000"),
                "water_fee": Decimal("60000"),
            },
        },
    ]


def demo_rooms() -> list[dict[str, Any]]:
    return [
        {"id": "101", "property_id": "1", "name": "Room 101", "price": Decimal("1500000"), "status": "occupied", "tenant_name": "Budi Santoso"},
        {"id": "102", "property_id": "1", "name": "Room 102", "price": Decimal("1500000"), "status": "available"},
        {"id": "103", "property_id": "1", "name": "Room 103", "price": Decimal("1750000"), "status": "maintenance"},
        {"id": "201", "property_id": "2", "name": "Room A1", "price": Decimal("1200000"), "status": "occupied", "tenant_name": "Siti Aminah"},
    ]


def demo_bills() -> list[dict[str, Any]]:
    return [
        {
            "id": "b1", "room_id": "101", "period": "2025-12", "meter_start": 1200, "meter_end": 1350,
            "cost_per_kwh": 1500, "usage_cost": 225000, "additional_cost": 75000, "total_amount": 1800000,
            "is_paid": True, "generated_at": "2025-12-25T10:00:00Z",
        },
        {
            "id": "b2", "room_id": "201", "period": "2025-12", "meter_start": 800, "meter_end": 920,
            "cost_per_kwh": 2000, "usage_cost": 240000, "additional_cost": 90000, "total_amount": 1530000,
            "is_paid": True, "generated_at": "2025-12-26T09:00:00Z",
        },
        {
            "id": "b3", "room_id": "101", "period": "2026-01", "meter_start": 1350, "meter_end": 1480,
            "cost_per_kwh": 1500, "usage_cost": 195000, "additional_cost": 75000, "total_amount": 1770000,
            "is_paid": False, "generated_at": "2026-01-25T10:00:00Z",
        },
    ]


def demo_meter_readings() -> list[dict[str, Any]]:
    return [
        {"id": "mr1", "room_id": "101", "period": "2025-12", "meter_start": 1200, "meter_end": 1350, "recorded_at": "2025-12-25T10:00:00Z"},
        {"id": "mr2", "room_id": "201", "period": "2025-12", "meter_start": 800, "meter_end": 920, "recorded_at": "2025-12-26T09:00:00Z"},
        {"id": "mr3", "room_id": "101", "period": "2026-01", "meter_start": 1350, "meter_end": 1480, "recorded_at": "2026-01-25T10:00:00Z"},
        # Partial reading for the running month
        {"id": "mr4", "room_id": "101", "period": "2026-02", "meter_start": 1480, "meter_end": 1500, "recorded_at": "2026-02-05T08:00:00Z"},
    ]


def demo_tenants() -> list[dict[str, Any]]:
    return [
        {"id": "1", "name": "Budi Santoso", "contact": "08123456789", "id_card_number": "3201234567890001", "status": "active", "room_id": "101"},
        {"id": "2", "name": "Siti Aminah", "contact": "081987654321", "id_card_number": "3201234567890002", "status": "active", "room_id": "201"},
    ]


def default_dataset(config: Settings) -> dict[str, Any]:
    """Raw defaults per collection name. Collections are empty when demo data is off."""
    if not config.SEED_DEMO_DATA:
        return {
            PROPERTIES: [],
            ROOMS: [],
            BILLS: [],
            METER_READINGS: [],
            TENANTS: [],
            SETTINGS: default_settings(config),
        }
    return {
        PROPERTIES: demo_properties(),
        ROOMS: demo_rooms(),
        BILLS: demo_bills(),
        METER_READINGS: demo_meter_readings(),
        TENANTS: demo_tenants(),
        SETTINGS: default_settings(config),
    }
