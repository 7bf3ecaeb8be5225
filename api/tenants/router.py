"""
Tenant API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path, status

from core.db import Store, get_store
from core.schema import MAX_SQLITE_INTEGER

from . import schemas, service

router = APIRouter()


@router.get("/tenants")
async def list_tenants(store: Store = Depends(get_store)) -> list[dict]:
    return await service.list_tenants(store)


@router.get("/tenants/{tenant_id}")
async def get_tenant(
    tenant_id: int = Path(..., le=MAX_SQLITE_INTEGER),
    store: Store = Depends(get_store),
) -> dict:
    return await service.get_tenant(store, tenant_id)


@router.get("/properties/{property_id}/tenants")
async def list_property_tenants(
    property_id: int = Path(..., le=MAX_SQLITE_INTEGER),
    store: Store = Depends(get_store),
) -> list[dict]:
    return await service.list_tenants_for_property(store, property_id)


@router.post("/tenants", status_code=status.HTTP_201_CREATED)
async def create_tenant(
    request: schemas.TenantCreateRequest,
    store: Store = Depends(get_store),
) -> dict:
    return await service.create_tenant(
        store,
        name=request.name,
        rent_due=request.rent_due,
        property_id=request.property_id,
    )


@router.put("/tenants/{tenant_id}")
async def update_tenant(
    request: schemas.TenantUpdateRequest,
    tenant_id: int = Path(..., le=MAX_SQLITE_INTEGER),
    store: Store = Depends(get_store),
) -> dict:
    return await service.update_tenant(store, tenant_id, request.model_dump(exclude_unset=True))


@router.delete("/tenants/{tenant_id}")
async def delete_tenant(
    tenant_id: int = Path(..., le=MAX_SQLITE_INTEGER),
    store: Store = Depends(get_store),
) -> dict:
    return await service.delete_tenant(store, tenant_id)
