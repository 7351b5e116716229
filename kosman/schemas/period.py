"""Billing period type."""

from typing import Annotated

from pydantic import StringConstraints

PERIOD_PATTERN = r"^\d{4}-(0[1-9]|1[0-2])$"

# A billing cycle as "YYYY-MM"
Period = Annotated[str, StringConstraints(pattern=PERIOD_PATTERN)]


def period_sort_key(period: str) -> tuple[int, int]:
    """Parse a period into a (year, month) pair for chronological ordering."""
    year, month = period.split("-", maxsplit=1)
    return int(year), int(month)
