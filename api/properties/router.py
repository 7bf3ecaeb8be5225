"""
Property API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path, status

from core.db import Store, get_store
from core.schema import MAX_SQLITE_INTEGER

from . import schemas, service

router = APIRouter()


@router.get("/properties")
async def list_properties(store: Store = Depends(get_store)) -> list[dict]:
    return await service.list_properties(store)


@router.get("/properties/{property_id}")
async def get_property(
    property_id: int = Path(..., le=MAX_SQLITE_INTEGER),
    store: Store = Depends(get_store),
) -> dict:
    return await service.get_property(store, property_id)


@router.post("/properties", status_code=status.HTTP_201_CREATED)
async def create_property(
    request: schemas.PropertyCreateRequest,
    store: Store = Depends(get_store),
) -> dict:
    return await service.create_property(
        store,
        address=request.address,
        listing_price=request.listing_price,
        rent=request.rent,
    )


@router.put("/properties/{property_id}")
async def update_property(
    request: schemas.PropertyUpdateRequest,
    property_id: int = Path(..., le=MAX_SQLITE_INTEGER),
    store: Store = Depends(get_store),
) -> dict:
    return await service.update_property(store, property_id, request.model_dump(exclude_unset=True))


@router.delete("/properties/{property_id}")
async def delete_property(
    property_id: int = Path(..., le=MAX_SQLITE_INTEGER),
    store: Store = Depends(get_store),
) -> dict:
    return await service.delete_property(store, property_id)
