"""
Tenant persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import validation
from core.db import Store

UPDATABLE_COLUMNS = {
    "name": "Name",
    "rent_due": "RentDue",
    "property_id": "PropertyID",
}

# Inner join: a tenant whose property row is missing is not listed.
_TENANT_WITH_ADDRESS_SQL = """
    SELECT
      t.TenantID,
      t.Name,
      t.RentDue,
      t.PropertyID,
      p.Address AS property_address
    FROM Tenant t
    JOIN Property p ON p.PropertyID = t.PropertyID
"""


async def list_tenants(store: Store) -> list[dict[str, Any]]:
    return await store.fetch_all(_TENANT_WITH_ADDRESS_SQL)


async def get_tenant(store: Store, tenant_id: int) -> dict[str, Any] | None:
    return await store.fetch_one(
        _TENANT_WITH_ADDRESS_SQL
        + """
    WHERE t.TenantID = ?
        """,
        tenant_id,
    )


async def list_tenants_for_property(store: Store, property_id: int) -> list[dict[str, Any]]:
    """
    Plain foreign-key filter; no join, so no address column.
    """
    return await store.fetch_all(
        """
        SELECT TenantID, Name, RentDue, PropertyID
        FROM Tenant
        WHERE PropertyID = ?
        """,
        property_id,
    )


async def insert_tenant(store: Store, *, name: str, rent_due: float, property_id: int) -> int:
    result = await store.execute(
        """
        INSERT INTO Tenant (Name, RentDue, PropertyID)
        VALUES (?, ?, ?)
        """,
        name,
        rent_due,
        property_id,
    )
    if result.inserted_id is None:
        raise RuntimeError("Failed to create tenant.")
    return int(result.inserted_id)


async def update_tenant(store: Store, tenant_id: int, fields: dict[str, Any]) -> int:
    assignments, params = validation.set_clause(fields, UPDATABLE_COLUMNS)
    result = await store.execute(
        f"UPDATE Tenant SET {assignments} WHERE TenantID = ?",
        *params,
        tenant_id,
    )
    return result.rows_affected


async def delete_tenant(store: Store, tenant_id: int) -> int:
    result = await store.execute(
        """
        DELETE FROM Tenant
        WHERE TenantID = ?
        """,
        tenant_id,
    )
    return result.rows_affected
