"""
Relational schema for the store.

Column names are part of the JSON contract: rows are serialized with these
keys as-is.
"""

from __future__ import annotations

# Largest value SQLite can bind as an INTEGER parameter.
MAX_SQLITE_INTEGER = 2**63 - 1

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS Property (
    PropertyID INTEGER PRIMARY KEY AUTOINCREMENT,
    Address TEXT NOT NULL CHECK (length(trim(Address)) > 0),
    ListingPrice DECIMAL(12, 2) NOT NULL CHECK (ListingPrice >= 0),
    Rent DECIMAL(10, 2) NOT NULL CHECK (Rent >= 0)
);

CREATE TABLE IF NOT EXISTS Tenant (
    TenantID INTEGER PRIMARY KEY AUTOINCREMENT,
    Name TEXT NOT NULL CHECK (length(trim(Name)) > 0),
    RentDue DECIMAL(10, 2) NOT NULL CHECK (RentDue >= 0),
    PropertyID INTEGER NOT NULL,
    FOREIGN KEY (PropertyID) REFERENCES Property (PropertyID) ON DELETE RESTRICT
);

CREATE INDEX IF NOT EXISTS idx_tenant_property_id ON Tenant (PropertyID);
"""
