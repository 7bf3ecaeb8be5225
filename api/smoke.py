"""
End-to-end smoke check against a running API.

Usage (from `api/`):
    AIRPROP_API_URL=http://localhost:3000 python smoke.py

Creates a property and a tenant, reads them back, updates and deletes them.
Everything it creates is removed again on success.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any

import httpx

DEFAULT_API_URL = "http://localhost:3000"

logger = logging.getLogger(__name__)


class SmokeFailure(RuntimeError):
    pass


def api_base_url() -> str:
    return os.environ.get("AIRPROP_API_URL", DEFAULT_API_URL).strip().rstrip("/") or DEFAULT_API_URL


@dataclass(frozen=True)
class SmokeStep:
    name: str
    status_code: int
    expected: int

    @property
    def ok(self) -> bool:
        return self.status_code == self.expected


def run_smoke(client: httpx.Client) -> list[SmokeStep]:
    """
    Run every step in order; raise SmokeFailure at the first unexpected status.

    `client` must be rooted at the server (paths here start with /api).
    """
    steps: list[SmokeStep] = []

    def check(name: str, resp: httpx.Response, expected: int) -> Any:
        step = SmokeStep(name=name, status_code=resp.status_code, expected=expected)
        steps.append(step)
        logger.info("smoke_step name=%s status=%s expected=%s", name, resp.status_code, expected)
        if not step.ok:
            raise SmokeFailure(f"{name}: expected {expected}, got {resp.status_code} {resp.text[:300]}")
        return resp.json()

    check("health", client.get("/api/health"), 200)
    check("list_properties", client.get("/api/properties"), 200)
    check("list_tenants", client.get("/api/tenants"), 200)

    created = check(
        "create_property",
        client.post(
            "/api/properties",
            json={"address": "999 Test Street, Test City", "listingPrice": 400000.00, "rent": 2000.00},
        ),
        201,
    )
    property_id = created["PropertyID"]

    tenant = check(
        "create_tenant",
        client.post(
            "/api/tenants",
            json={"name": "Test Tenant", "rentDue": 2000.00, "propertyId": property_id},
        ),
        201,
    )
    tenant_id = tenant["TenantID"]

    summary = check("get_property", client.get(f"/api/properties/{property_id}"), 200)
    if summary["tenant_count"] != 1:
        raise SmokeFailure(f"get_property: expected tenant_count 1, got {summary['tenant_count']}")

    check("get_tenant", client.get(f"/api/tenants/{tenant_id}"), 200)
    check("list_property_tenants", client.get(f"/api/properties/{property_id}/tenants"), 200)
    check("update_property", client.put(f"/api/properties/{property_id}", json={"rent": 2100.00}), 200)
    check("update_tenant", client.put(f"/api/tenants/{tenant_id}", json={"rentDue": 2100.00}), 200)
    check("reject_negative_rent", client.put(f"/api/properties/{property_id}", json={"rent": -5}), 400)
    check("delete_tenant", client.delete(f"/api/tenants/{tenant_id}"), 200)
    check("delete_property", client.delete(f"/api/properties/{property_id}"), 200)
    check("property_gone", client.get(f"/api/properties/{property_id}"), 404)
    return steps


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    base_url = api_base_url()
    try:
        with httpx.Client(base_url=base_url, timeout=10.0) as client:
            steps = run_smoke(client)
    except (SmokeFailure, httpx.HTTPError) as exc:
        logger.error("smoke_failed base_url=%s error=%s", base_url, exc)
        return 1
    logger.info("smoke_passed base_url=%s steps=%s", base_url, len(steps))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
