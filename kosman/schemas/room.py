"""Room schemas."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, field_validator

from kosman.models.enums import RoomStatus


class RoomBase(BaseModel):
    """Base room schema."""

    property_id: str
    name: str
    price: Decimal
    status: RoomStatus = RoomStatus.AVAILABLE
    tenant_name: str | None = None
    use_trash_service: bool | None = None
    move_in_date: date | None = None


class RoomCreate(RoomBase):
    """Schema for creating a new room."""


class RoomUpdate(BaseModel):
    """Schema for updating a room."""

    property_id: str | None = None
    name: str | None = None
    price: Decimal | None = None
    status: RoomStatus | None = None
    tenant_name: str | None = None
    use_trash_service: bool | None = None
    move_in_date: date | None = None

    @field_validator("property_id", "name", "price", "status")
    @classmethod
    def reject_null(cls, v):
        """Tenant name, trash flag and move-in date may be cleared; these may not."""
        if v is None:
            raise ValueError("Field cannot be null")
        return v


class Room(RoomBase):
    """A rentable room. `property_id` is not checked against existing properties."""

    model_config = ConfigDict(frozen=True)

    id: str
