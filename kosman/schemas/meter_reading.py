"""MeterReading schemas."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from kosman.schemas.period import Period


class MeterReadingBase(BaseModel):
    """Base meter reading schema."""

    room_id: str
    period: Period
    meter_start: Decimal
    meter_end: Decimal


class MeterReadingCreate(MeterReadingBase):
    """Schema for recording a meter reading."""


class MeterReading(MeterReadingBase):
    """Start/end meter values for a room over one period."""

    model_config = ConfigDict(frozen=True)

    id: str
    recorded_at: datetime
