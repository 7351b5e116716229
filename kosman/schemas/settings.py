"""Tariff settings schemas."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict


class TariffBase(BaseModel):
    """Rate per kWh plus flat monthly fees."""

    cost_per_kwh: Decimal
    trash_fee: Decimal
    water_fee: Decimal


class PropertySettings(TariffBase):
    """Per-property override of the global tariff."""

    model_config = ConfigDict(frozen=True)


class GlobalSettings(TariffBase):
    """Default tariff for properties without an override."""

    model_config = ConfigDict(frozen=True)


class GlobalSettingsUpdate(BaseModel):
    """Schema for updating the global tariff.

    No range checks: negative rates are accepted as given.
    """

    cost_per_kwh: Decimal | None = None
    trash_fee: Decimal | None = None
    water_fee: Decimal | None = None
