"""Tenant schemas."""

from pydantic import BaseModel, ConfigDict, field_validator

from kosman.models.enums import TenantStatus


class TenantBase(BaseModel):
    """Base tenant schema."""

    name: str
    contact: str = ""
    id_card_number: str = ""  # KTP
    status: TenantStatus = TenantStatus.ACTIVE
    room_id: str | None = None


class TenantCreate(TenantBase):
    """Schema for creating a new tenant."""


class TenantUpdate(BaseModel):
    """Schema for updating a tenant."""

    name: str | None = None
    contact: str | None = None
    id_card_number: str | None = None
    status: TenantStatus | None = None
    room_id: str | None = None

    @field_validator("name", "contact", "id_card_number", "status")
    @classmethod
    def reject_null(cls, v):
        """Only the room link may be cleared with null."""
        if v is None:
            raise ValueError("Field cannot be null")
        return v


class Tenant(TenantBase):
    """A tenant, optionally linked to a room."""

    model_config = ConfigDict(frozen=True)

    id: str
