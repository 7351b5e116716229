"""Global tariff routes."""

from fastapi import APIRouter, Depends

from kosman.api.dependencies import get_store
from kosman.schemas.settings import GlobalSettings, GlobalSettingsUpdate
from kosman.services.kos_store import KosStore

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("", response_model=GlobalSettings)
def get_settings(store: KosStore = Depends(get_store)) -> GlobalSettings:
    """Get the global tariff."""
    return store.settings


@router.patch("", response_model=GlobalSettings)
def update_settings(
    updates: GlobalSettingsUpdate,
    store: KosStore = Depends(get_store),
) -> GlobalSettings:
    """Update the global tariff. Unset fields keep their value."""
    return store.update_settings(updates)
