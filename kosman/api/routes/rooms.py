"""Room API routes."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from kosman.api.dependencies import get_store
from kosman.schemas.bill import Bill, BillDraft
from kosman.schemas.meter_reading import MeterReading
from kosman.schemas.period import PERIOD_PATTERN
from kosman.schemas.room import Room, RoomCreate, RoomUpdate
from kosman.services.kos_store import KosStore

router = APIRouter(prefix="/rooms", tags=["rooms"])


@router.post("", response_model=Room, status_code=status.HTTP_201_CREATED)
def create_room(
    room_data: RoomCreate,
    store: KosStore = Depends(get_store),
) -> Room:
    """Create a room. The property is not required to exist."""
    return store.add_room(room_data)


@router.get("", response_model=list[Room])
def list_rooms(store: KosStore = Depends(get_store)) -> list[Room]:
    """List all rooms."""
    return list(store.rooms)


@router.get("/{room_id}", response_model=Room)
def get_room(room_id: str, store: KosStore = Depends(get_store)) -> Room:
    """Get a room by ID."""
    room = store.get_room_by_id(room_id)
    if not room:
        raise HTTPException(status_code=404, detail="Room not found")
    return room


@router.patch("/{room_id}", response_model=Room)
def update_room(
    room_id: str,
    room_data: RoomUpdate,
    store: KosStore = Depends(get_store),
) -> Room:
    """Update a room."""
    room = store.update_room(room_id, room_data)
    if not room:
        raise HTTPException(status_code=404, detail="Room not found")
    return room


@router.delete("/{room_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_room(room_id: str, store: KosStore = Depends(get_store)) -> None:
    """Delete a room. Its bills, readings and tenant links are kept."""
    if not store.delete_room(room_id):
        raise HTTPException(status_code=404, detail="Room not found")


@router.get("/{room_id}/bills", response_model=list[Bill])
def list_room_bills(room_id: str, store: KosStore = Depends(get_store)) -> list[Bill]:
    """List the bills of a room."""
    return store.get_bills_by_room_id(room_id)


@router.get("/{room_id}/readings", response_model=list[MeterReading])
def list_room_readings(room_id: str, store: KosStore = Depends(get_store)) -> list[MeterReading]:
    """List the meter readings of a room, newest period first."""
    return store.get_meter_readings_by_room_id(room_id)


@router.get("/{room_id}/bill-draft", response_model=BillDraft)
def get_bill_draft(
    room_id: str,
    period: str = Query(..., pattern=PERIOD_PATTERN, description="Billing period (YYYY-MM)"),
    store: KosStore = Depends(get_store),
) -> BillDraft:
    """Suggest bill inputs from the period's reading and the property tariff."""
    return store.draft_bill(room_id, period)
