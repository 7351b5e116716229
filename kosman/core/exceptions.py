"""Domain exceptions."""


class KosError(Exception):
    """Base class for errors raised by the domain store."""


class RoomNotFoundError(KosError):
    """Raised when an operation needs a room that does not exist."""

    def __init__(self, room_id: str) -> None:
        self.room_id = room_id
        super().__init__(f"Room not found: {room_id}")
