"""
Property persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import validation
from core.db import Store

# Request field name -> column name; also the allowlist for UPDATE.
UPDATABLE_COLUMNS = {
    "address": "Address",
    "listing_price": "ListingPrice",
    "rent": "Rent",
}

_PROPERTY_SUMMARY_SQL = """
    SELECT
      p.PropertyID,
      p.Address,
      p.ListingPrice,
      p.Rent,
      COUNT(t.TenantID) AS tenant_count,
      GROUP_CONCAT(t.Name) AS tenant_names
    FROM Property p
    LEFT JOIN Tenant t ON t.PropertyID = p.PropertyID
"""


async def list_properties(store: Store) -> list[dict[str, Any]]:
    """
    Every property with its tenant count and comma-joined tenant names.
    """
    return await store.fetch_all(
        _PROPERTY_SUMMARY_SQL
        + """
    GROUP BY p.PropertyID
        """
    )


async def get_property(store: Store, property_id: int) -> dict[str, Any] | None:
    return await store.fetch_one(
        _PROPERTY_SUMMARY_SQL
        + """
    WHERE p.PropertyID = ?
    GROUP BY p.PropertyID
        """,
        property_id,
    )


async def property_exists(store: Store, property_id: int) -> bool:
    row = await store.fetch_one(
        """
        SELECT 1 AS ok
        FROM Property
        WHERE PropertyID = ?
        LIMIT 1
        """,
        property_id,
    )
    return row is not None


async def count_tenants(store: Store, property_id: int) -> int:
    row = await store.fetch_one(
        """
        SELECT COUNT(*) AS tenant_count
        FROM Tenant
        WHERE PropertyID = ?
        """,
        property_id,
    )
    return int(row["tenant_count"]) if row is not None else 0


async def insert_property(store: Store, *, address: str, listing_price: float, rent: float) -> int:
    result = await store.execute(
        """
        INSERT INTO Property (Address, ListingPrice, Rent)
        VALUES (?, ?, ?)
        """,
        address,
        listing_price,
        rent,
    )
    if result.inserted_id is None:
        raise RuntimeError("Failed to create property.")
    return int(result.inserted_id)


async def update_property(store: Store, property_id: int, fields: dict[str, Any]) -> int:
    """
    Apply a partial update. Returns the number of rows matched.
    """
    assignments, params = validation.set_clause(fields, UPDATABLE_COLUMNS)
    result = await store.execute(
        f"UPDATE Property SET {assignments} WHERE PropertyID = ?",
        *params,
        property_id,
    )
    return result.rows_affected


async def delete_property(store: Store, property_id: int) -> int:
    result = await store.execute(
        """
        DELETE FROM Property
        WHERE PropertyID = ?
        """,
        property_id,
    )
    return result.rows_affected
