"""Property schemas."""

from pydantic import BaseModel, ConfigDict, field_validator

from kosman.schemas.settings import PropertySettings


class PropertyBase(BaseModel):
    """Base property schema."""

    name: str
    address: str = ""
    description: str = ""
    image: str = ""
    settings: PropertySettings | None = None


class PropertyCreate(PropertyBase):
    """Schema for creating a new property."""


class PropertyUpdate(BaseModel):
    """Schema for updating a property."""

    name: str | None = None
    address: str | None = None
    description: str | None = None
    image: str | None = None
    settings: PropertySettings | None = None

    @field_validator("name", "address", "description", "image")
    @classmethod
    def reject_null(cls, v: str | None) -> str | None:
        """Only `settings` may be cleared with null."""
        if v is None:
            raise ValueError("Field cannot be null")
        return v


class Property(PropertyBase):
    """A boarding house. Without `settings` it bills with the global tariff."""

    model_config = ConfigDict(frozen=True)

    id: str
