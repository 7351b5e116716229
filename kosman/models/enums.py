"""Enum definitions for room and tenant status."""

from enum import Enum


class RoomStatus(str, Enum):
    """Occupancy state of a room."""

    AVAILABLE = "available"
    OCCUPIED = "occupied"
    MAINTENANCE = "maintenance"


class TenantStatus(str, Enum):
    """Whether a tenant is currently renting."""

    ACTIVE = "active"
    INACTIVE = "inactive"
