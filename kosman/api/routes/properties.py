"""Property API routes."""

from fastapi import APIRouter, Depends, HTTPException, status

from kosman.api.dependencies import get_store
from kosman.schemas.property import Property, PropertyCreate, PropertyUpdate
from kosman.schemas.room import Room
from kosman.schemas.settings import TariffBase
from kosman.services.kos_store import KosStore

router = APIRouter(prefix="/properties", tags=["properties"])


@router.post("", response_model=Property, status_code=status.HTTP_201_CREATED)
def create_property(
    property_data: PropertyCreate,
    store: KosStore = Depends(get_store),
) -> Property:
    """Create a new property."""
    return store.add_property(property_data)


@router.get("", response_model=list[Property])
def list_properties(store: KosStore = Depends(get_store)) -> list[Property]:
    """List all properties."""
    return list(store.properties)


@router.get("/{property_id}", response_model=Property)
def get_property(
    property_id: str,
    store: KosStore = Depends(get_store),
) -> Property:
    """Get a property by ID."""
    property_obj = store.get_property_by_id(property_id)
    if not property_obj:
        raise HTTPException(status_code=404, detail="Property not found")
    return property_obj


@router.patch("/{property_id}", response_model=Property)
def update_property(
    property_id: str,
    property_data: PropertyUpdate,
    store: KosStore = Depends(get_store),
) -> Property:
    """Update a property."""
    property_obj = store.update_property(property_id, property_data)
    if not property_obj:
        raise HTTPException(status_code=404, detail="Property not found")
    return property_obj


@router.delete("/{property_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_property(
    property_id: str,
    store: KosStore = Depends(get_store),
) -> None:
    """Delete a property together with its rooms."""
    if not store.delete_property(property_id):
        raise HTTPException(status_code=404, detail="Property not found")


@router.get("/{property_id}/rooms", response_model=list[Room])
def list_property_rooms(
    property_id: str,
    store: KosStore = Depends(get_store),
) -> list[Room]:
    """List the rooms of a property."""
    return store.get_rooms_by_property_id(property_id)


@router.get("/{property_id}/settings", response_model=TariffBase)
def get_effective_settings(
    property_id: str,
    store: KosStore = Depends(get_store),
) -> TariffBase:
    """Get the tariff that applies to a property (its override or the global one)."""
    if not store.get_property_by_id(property_id):
        raise HTTPException(status_code=404, detail="Property not found")
    return store.effective_settings_for(property_id)
