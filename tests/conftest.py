from typing import AsyncIterator, Iterator

import pytest
from fastapi.testclient import TestClient

from core.db import Store
from main import app


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def db_path(tmp_path, monkeypatch) -> str:
    """Point the app at a fresh store file for each test."""
    path = str(tmp_path / "data" / "airprop.db")
    monkeypatch.setenv("AIRPROP_DB_PATH", path)
    return path


@pytest.fixture
def client(db_path: str) -> Iterator[TestClient]:
    """Test client with the app lifespan (store open/close) running."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
async def store(db_path: str) -> AsyncIterator[Store]:
    s = Store(db_path)
    await s.open()
    try:
        yield s
    finally:
        await s.close()


def create_property(client: TestClient, **overrides) -> dict:
    payload = {"address": "1 A St", "listingPrice": 100000, "rent": 900}
    payload.update(overrides)
    resp = client.post("/api/properties", json=payload)
    assert resp.status_code == 201, resp.text
    return resp.json()


def create_tenant(client: TestClient, property_id: int, **overrides) -> dict:
    payload = {"name": "T", "rentDue": 900, "propertyId": property_id}
    payload.update(overrides)
    resp = client.post("/api/tenants", json=payload)
    assert resp.status_code == 201, resp.text
    return resp.json()
