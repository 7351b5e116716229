"""Tenant API routes."""

from fastapi import APIRouter, Depends, HTTPException, status

from kosman.api.dependencies import get_store
from kosman.schemas.tenant import Tenant, TenantCreate, TenantUpdate
from kosman.services.kos_store import KosStore

router = APIRouter(prefix="/tenants", tags=["tenants"])


@router.post("", response_model=Tenant, status_code=status.HTTP_201_CREATED)
def create_tenant(
    tenant_data: TenantCreate,
    store: KosStore = Depends(get_store),
) -> Tenant:
    """Register a tenant."""
    return store.add_tenant(tenant_data)


@router.get("", response_model=list[Tenant])
def list_tenants(store: KosStore = Depends(get_store)) -> list[Tenant]:
    return list(store.tenants)


@router.get("/{tenant_id}", response_model=Tenant)
def get_tenant(tenant_id: str, store: KosStore = Depends(get_store)) -> Tenant:
    tenant = store.get_tenant_by_id(tenant_id)
    if not tenant:
        raise HTTPException(status_code=404, detail="Tenant not found")
    return tenant


@router.patch("/{tenant_id}", response_model=Tenant)
def update_tenant(
    tenant_id: str,
    tenant_data: TenantUpdate,
    store: KosStore = Depends(get_store),
) -> Tenant:
    tenant = store.update_tenant(tenant_id, tenant_data)
    if not tenant:
        raise HTTPException(status_code=404, detail="Tenant not found")
    return tenant


@router.delete("/{tenant_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_tenant(tenant_id: str, store: KosStore = Depends(get_store)) -> None:
    if not store.delete_tenant(tenant_id):
        raise HTTPException(status_code=404, detail="Tenant not found")
