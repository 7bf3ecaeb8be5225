"""
Tenant business logic.

The referenced property is checked explicitly before any insert or update;
the store's foreign key is only a backstop.
"""

from __future__ import annotations

import logging
from typing import Any

from core import validation
from core.db import Store
from core.errors import NotFoundError, StoreError, ValidationError
from properties import repository as property_repository

from . import repository

logger = logging.getLogger(__name__)

_FIELD_LABELS = {
    "name": "Name",
    "rent_due": "Rent due",
    "property_id": "Property ID",
}


async def list_tenants(store: Store) -> list[dict[str, Any]]:
    return await repository.list_tenants(store)


async def get_tenant(store: Store, tenant_id: int) -> dict[str, Any]:
    row = await repository.get_tenant(store, tenant_id)
    if row is None:
        raise NotFoundError("Tenant not found")
    return row


async def list_tenants_for_property(store: Store, property_id: int) -> list[dict[str, Any]]:
    # Unknown property ids yield an empty list, not an error.
    return await repository.list_tenants_for_property(store, property_id)


async def _require_property(store: Store, property_id: int) -> None:
    if not await property_repository.property_exists(store, property_id):
        raise NotFoundError("Property not found")


async def create_tenant(
    store: Store,
    *,
    name: str | None,
    rent_due: float | None,
    property_id: int | None,
) -> dict[str, Any]:
    if validation.is_blank(name) or rent_due is None or property_id is None:
        raise ValidationError("Name, rent due, and property ID are required")
    if validation.is_negative(rent_due):
        raise ValidationError("Rent due must be non-negative")
    if validation.is_too_large(rent_due):
        raise ValidationError("Rent due is too large")

    async with store.transaction():
        await _require_property(store, property_id)
        tenant_id = await repository.insert_tenant(
            store,
            name=name,
            rent_due=rent_due,
            property_id=property_id,
        )
        row = await repository.get_tenant(store, tenant_id)

    if row is None:
        raise StoreError("Failed to read back created tenant.")
    logger.info("tenant_created tenant_id=%s property_id=%s", tenant_id, property_id)
    return row


def _check_update_fields(fields: dict[str, Any]) -> None:
    if not fields:
        raise ValidationError("No fields to update")
    for name, value in fields.items():
        if value is None:
            raise ValidationError(f"{_FIELD_LABELS[name]} cannot be null")
    if "name" in fields and validation.is_blank(fields["name"]):
        raise ValidationError("Name cannot be empty")
    if validation.is_negative(fields.get("rent_due")):
        raise ValidationError("Rent due must be non-negative")
    if validation.is_too_large(fields.get("rent_due")):
        raise ValidationError("Rent due is too large")


async def update_tenant(store: Store, tenant_id: int, fields: dict[str, Any]) -> dict[str, Any]:
    """
    Partial update. A new property id must reference an existing property
    before the UPDATE runs.
    """
    _check_update_fields(fields)

    async with store.transaction():
        if "property_id" in fields:
            await _require_property(store, fields["property_id"])
        matched = await repository.update_tenant(store, tenant_id, fields)
        if matched == 0:
            raise NotFoundError("Tenant not found")
        row = await repository.get_tenant(store, tenant_id)

    if row is None:
        raise StoreError("Failed to read back updated tenant.")
    logger.info("tenant_updated tenant_id=%s fields=%s", tenant_id, ",".join(sorted(fields)))
    return row


async def delete_tenant(store: Store, tenant_id: int) -> dict[str, str]:
    deleted = await repository.delete_tenant(store, tenant_id)
    if deleted == 0:
        raise NotFoundError("Tenant not found")
    logger.info("tenant_deleted tenant_id=%s", tenant_id)
    return {"message": "Tenant deleted successfully"}
