"""
Sample data for a fresh store.

Usage (from `api/`):
    python seed.py

Creates the schema if needed and inserts three properties with one tenant
each. Does nothing when the store already holds properties.
"""

from __future__ import annotations

import asyncio
import logging

from core import db
from properties import repository as property_repository
from tenants import repository as tenant_repository

logger = logging.getLogger(__name__)

SAMPLE_PROPERTIES = [
    ("123 Main St, City A", 250000.00, 1500.00),
    ("456 Oak Ave, City B", 300000.00, 1800.00),
    ("789 Pine Rd, City C", 200000.00, 1200.00),
]

# (name, rent due, index into SAMPLE_PROPERTIES)
SAMPLE_TENANTS = [
    ("John Doe", 1500.00, 0),
    ("Jane Smith", 1800.00, 1),
    ("Bob Johnson", 1200.00, 2),
]


async def seed(store: db.Store) -> dict[str, int]:
    """
    Insert the sample rows. Returns how many of each were inserted.
    """
    existing = await store.fetch_one("SELECT COUNT(*) AS property_count FROM Property")
    if existing is not None and existing["property_count"] > 0:
        logger.info("seed_skipped property_count=%s", existing["property_count"])
        return {"properties": 0, "tenants": 0}

    async with store.transaction():
        property_ids: list[int] = []
        for address, listing_price, rent in SAMPLE_PROPERTIES:
            property_ids.append(
                await property_repository.insert_property(
                    store,
                    address=address,
                    listing_price=listing_price,
                    rent=rent,
                )
            )
        for name, rent_due, index in SAMPLE_TENANTS:
            await tenant_repository.insert_tenant(
                store,
                name=name,
                rent_due=rent_due,
                property_id=property_ids[index],
            )

    logger.info("seed_complete properties=%s tenants=%s", len(SAMPLE_PROPERTIES), len(SAMPLE_TENANTS))
    return {"properties": len(SAMPLE_PROPERTIES), "tenants": len(SAMPLE_TENANTS)}


async def main() -> None:
    store = db.Store(db.database_path())
    await store.open()
    try:
        await seed(store)
    finally:
        await store.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
