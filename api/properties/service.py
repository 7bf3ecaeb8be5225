"""
Property business logic.

Validation and existence checks run before any mutating statement; the
check-then-act sequences run inside one store transaction.
"""

from __future__ import annotations

import logging
from typing import Any

from core import validation
from core.db import Store
from core.errors import ConflictError, NotFoundError, StoreError, ValidationError

from . import repository

logger = logging.getLogger(__name__)

# Labels used in per-field error messages.
_FIELD_LABELS = {
    "address": "Address",
    "listing_price": "Listing price",
    "rent": "Rent",
}


async def list_properties(store: Store) -> list[dict[str, Any]]:
    return await repository.list_properties(store)


async def get_property(store: Store, property_id: int) -> dict[str, Any]:
    row = await repository.get_property(store, property_id)
    if row is None:
        raise NotFoundError("Property not found")
    return row


async def create_property(
    store: Store,
    *,
    address: str | None,
    listing_price: float | None,
    rent: float | None,
) -> dict[str, Any]:
    if validation.is_blank(address) or listing_price is None or rent is None:
        raise ValidationError("Address, listing price, and rent are required")
    if validation.is_negative(listing_price) or validation.is_negative(rent):
        raise ValidationError("Listing price and rent must be non-negative")
    if validation.is_too_large(listing_price) or validation.is_too_large(rent):
        raise ValidationError("Listing price and rent are too large")

    async with store.transaction():
        property_id = await repository.insert_property(
            store,
            address=address,
            listing_price=listing_price,
            rent=rent,
        )
        row = await repository.get_property(store, property_id)

    if row is None:
        raise StoreError("Failed to read back created property.")
    logger.info("property_created property_id=%s", property_id)
    return row


def _check_update_fields(fields: dict[str, Any]) -> None:
    if not fields:
        raise ValidationError("No fields to update")
    for name, value in fields.items():
        label = _FIELD_LABELS[name]
        if value is None:
            raise ValidationError(f"{label} cannot be null")
        if name == "address" and validation.is_blank(value):
            raise ValidationError("Address cannot be empty")
        if name != "address" and validation.is_negative(value):
            raise ValidationError(f"{label} must be non-negative")
        if validation.is_too_large(value):
            raise ValidationError(f"{label} is too large")


async def update_property(store: Store, property_id: int, fields: dict[str, Any]) -> dict[str, Any]:
    """
    Partial update: only keys present in `fields` change.
    """
    _check_update_fields(fields)

    async with store.transaction():
        matched = await repository.update_property(store, property_id, fields)
        if matched == 0:
            raise NotFoundError("Property not found")
        row = await repository.get_property(store, property_id)

    if row is None:
        raise StoreError("Failed to read back updated property.")
    logger.info("property_updated property_id=%s fields=%s", property_id, ",".join(sorted(fields)))
    return row


async def delete_property(store: Store, property_id: int) -> dict[str, str]:
    """
    Delete a property that has no tenants.

    Tenants are never removed implicitly; a property that still has tenants
    is rejected with a conflict so that no tenant row is orphaned.
    """
    async with store.transaction():
        tenant_count = await repository.count_tenants(store, property_id)
        if tenant_count > 0:
            raise ConflictError(
                f"Property has {tenant_count} tenant(s); delete or move them before deleting the property"
            )
        deleted = await repository.delete_property(store, property_id)
        if deleted == 0:
            raise NotFoundError("Property not found")

    logger.info("property_deleted property_id=%s", property_id)
    return {"message": "Property deleted successfully"}
