"""Bill API routes."""

from fastapi import APIRouter, Depends, HTTPException, status

from kosman.api.dependencies import get_store
from kosman.schemas.bill import Bill, BillCreate
from kosman.services.kos_store import KosStore

router = APIRouter(prefix="/bills", tags=["bills"])


@router.post("", response_model=Bill, status_code=status.HTTP_201_CREATED)
def generate_bill(
    data: BillCreate,
    store: KosStore = Depends(get_store),
) -> Bill:
    """Generate a bill for a room.

        usage_cost = (meter_end - meter_start) * cost_per_kwh
        total_amount = room price + usage_cost + additional_cost

    Responds 404 when the room does not exist.
    """
    return store.generate_bill(data)


@router.get("", response_model=list[Bill])
def list_bills(store: KosStore = Depends(get_store)) -> list[Bill]:
    """List all bills, newest first."""
    return list(store.bills)


@router.get("/{bill_id}", response_model=Bill)
def get_bill(bill_id: str, store: KosStore = Depends(get_store)) -> Bill:
    """Get a bill by ID."""
    bill = store.get_bill_by_id(bill_id)
    if not bill:
        raise HTTPException(status_code=404, detail="Bill not found")
    return bill


@router.post("/{bill_id}/pay", response_model=Bill)
def mark_bill_as_paid(bill_id: str, store: KosStore = Depends(get_store)) -> Bill:
    """Mark a bill as paid. Paying twice is harmless."""
    bill = store.mark_bill_as_paid(bill_id)
    if not bill:
        raise HTTPException(status_code=404, detail="Bill not found")
    return bill


@router.delete("/{bill_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_bill(bill_id: str, store: KosStore = Depends(get_store)) -> None:
    """Delete a bill."""
    if not store.delete_bill(bill_id):
        raise HTTPException(status_code=404, detail="Bill not found")
