"""MeterReading API routes."""

from fastapi import APIRouter, Depends, HTTPException, status

from kosman.api.dependencies import get_store
from kosman.schemas.meter_reading import MeterReading, MeterReadingCreate
from kosman.services.kos_store import KosStore

router = APIRouter(prefix="/readings", tags=["readings"])


@router.post("", response_model=MeterReading, status_code=status.HTTP_201_CREATED)
def create_reading(
    reading_data: MeterReadingCreate,
    store: KosStore = Depends(get_store),
) -> MeterReading:
    """Record a meter reading. Several readings per room and period are allowed."""
    return store.add_meter_reading(reading_data)


@router.get("", response_model=list[MeterReading])
def list_readings(store: KosStore = Depends(get_store)) -> list[MeterReading]:
    """List all readings, most recently added first."""
    return list(store.meter_readings)


@router.delete("/{reading_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_reading(reading_id: str, store: KosStore = Depends(get_store)) -> None:
    """Delete a meter reading."""
    if not store.delete_meter_reading(reading_id):
        raise HTTPException(status_code=404, detail="Meter reading not found")
