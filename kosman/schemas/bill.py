"""Bill schemas."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from kosman.schemas.period import Period


class BillCreate(BaseModel):
    """Inputs for generating a bill.

    The total is computed as:
        room price + (meter_end - meter_start) * cost_per_kwh + additional_cost
    """

    room_id: str
    period: Period
    meter_start: Decimal
    meter_end: Decimal
    cost_per_kwh: Decimal
    additional_cost: Decimal = Decimal("0")  # water, trash, wifi, etc.


class Bill(BaseModel):
    """A generated bill. Amounts are fixed at generation time."""

    model_config = ConfigDict(frozen=True)

    id: str
    room_id: str
    period: Period
    meter_start: Decimal
    meter_end: Decimal
    cost_per_kwh: Decimal
    usage_cost: Decimal
    additional_cost: Decimal
    total_amount: Decimal
    is_paid: bool = False
    generated_at: datetime


class BillDraft(BaseModel):
    """Suggested inputs for a bill, pre-filled from readings and tariff."""

    room_id: str
    period: Period
    room_price: Decimal
    meter_start: Decimal | None
    meter_end: Decimal | None
    cost_per_kwh: Decimal
    additional_cost: Decimal
