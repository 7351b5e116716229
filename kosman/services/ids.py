"""Id and timestamp sources for new records."""

import itertools
import uuid
from datetime import UTC, datetime


def new_id() -> str:
    """Random unique id."""
    return uuid.uuid4().hex


def utc_now() -> datetime:
    return datetime.now(UTC)


class SequentialIdFactory:
    """Deterministic ids: "<prefix>1", "<prefix>2", ..."""

    def __init__(self, prefix: str = "", start: int = 1) -> None:
        self.prefix = prefix
        self._counter = itertools.count(start)

    def __call__(self) -> str:
        return f"{self.prefix}{next(self._counter)}"
