import pytest

from conftest import create_property, create_tenant

pytestmark = pytest.mark.integration


class TestTenantEndpoints:

    def test_create_returns_row_with_property_address(self, client):
        prop = create_property(client, address="1 A St")

        tenant = create_tenant(client, prop["PropertyID"], name="T", rentDue=900)

        assert tenant["TenantID"] > 0
        assert tenant["Name"] == "T"
        assert tenant["RentDue"] == 900
        assert tenant["PropertyID"] == prop["PropertyID"]
        assert tenant["property_address"] == "1 A St"

    def test_get_after_create_matches_creation_response(self, client):
        prop = create_property(client)
        tenant = create_tenant(client, prop["PropertyID"])

        resp = client.get(f"/api/tenants/{tenant['TenantID']}")

        assert resp.status_code == 200
        assert resp.json() == tenant

    def test_create_for_missing_property_returns_404_and_creates_nothing(self, client):
        resp = client.post("/api/tenants", json={"name": "T", "rentDue": 1, "propertyId": 999})

        assert resp.status_code == 404
        assert resp.json() == {"error": "Property not found"}
        assert client.get("/api/tenants").json() == []

    @pytest.mark.parametrize(
        "payload",
        [
            {"rentDue": 1, "propertyId": 1},
            {"name": " ", "rentDue": 1, "propertyId": 1},
            {"name": "T", "propertyId": 1},
            {"name": "T", "rentDue": 1},
        ],
    )
    def test_create_requires_all_fields(self, client, payload):
        create_property(client)

        resp = client.post("/api/tenants", json=payload)

        assert resp.status_code == 400
        assert resp.json() == {"error": "Name, rent due, and property ID are required"}

    def test_create_rejects_negative_rent_due(self, client):
        prop = create_property(client)

        resp = client.post(
            "/api/tenants",
            json={"name": "T", "rentDue": -1, "propertyId": prop["PropertyID"]},
        )

        assert resp.status_code == 400
        assert resp.json() == {"error": "Rent due must be non-negative"}

    def test_list_joins_property_address(self, client):
        a = create_property(client, address="1 A St")
        b = create_property(client, address="2 B St")
        create_tenant(client, a["PropertyID"], name="Ann")
        create_tenant(client, b["PropertyID"], name="Bob")

        resp = client.get("/api/tenants")

        assert resp.status_code == 200
        addresses = {row["Name"]: row["property_address"] for row in resp.json()}
        assert addresses == {"Ann": "1 A St", "Bob": "2 B St"}

    def test_get_missing_returns_404(self, client):
        resp = client.get("/api/tenants/999")
        assert resp.status_code == 404
        assert resp.json() == {"error": "Tenant not found"}

    def test_list_by_property(self, client):
        a = create_property(client, address="1 A St")
        b = create_property(client, address="2 B St")
        ann = create_tenant(client, a["PropertyID"], name="Ann")
        create_tenant(client, b["PropertyID"], name="Bob")

        resp = client.get(f"/api/properties/{a['PropertyID']}/tenants")

        assert resp.status_code == 200
        assert resp.json() == [
            {
                "TenantID": ann["TenantID"],
                "Name": "Ann",
                "RentDue": ann["RentDue"],
                "PropertyID": a["PropertyID"],
            }
        ]

    def test_list_by_unknown_property_is_empty(self, client):
        resp = client.get("/api/properties/999/tenants")
        assert resp.status_code == 200
        assert resp.json() == []

    def test_update_changes_only_supplied_fields(self, client):
        prop = create_property(client)
        tenant = create_tenant(client, prop["PropertyID"], name="T", rentDue=900)

        resp = client.put(f"/api/tenants/{tenant['TenantID']}", json={"rentDue": 450.25})

        assert resp.status_code == 200
        body = resp.json()
        assert body["RentDue"] == 450.25
        assert body["Name"] == "T"
        assert body["PropertyID"] == prop["PropertyID"]

    def test_update_moves_tenant_to_another_property(self, client):
        a = create_property(client, address="1 A St")
        b = create_property(client, address="2 B St")
        tenant = create_tenant(client, a["PropertyID"])

        resp = client.put(f"/api/tenants/{tenant['TenantID']}", json={"propertyId": b["PropertyID"]})

        assert resp.status_code == 200
        assert resp.json()["property_address"] == "2 B St"
        assert client.get(f"/api/properties/{a['PropertyID']}").json()["tenant_count"] == 0
        assert client.get(f"/api/properties/{b['PropertyID']}").json()["tenant_count"] == 1

    def test_update_to_missing_property_returns_404_and_leaves_row(self, client):
        prop = create_property(client)
        tenant = create_tenant(client, prop["PropertyID"])

        resp = client.put(f"/api/tenants/{tenant['TenantID']}", json={"propertyId": 999})

        assert resp.status_code == 404
        assert resp.json() == {"error": "Property not found"}
        assert client.get(f"/api/tenants/{tenant['TenantID']}").json() == tenant

    def test_update_with_empty_body_is_rejected(self, client):
        prop = create_property(client)
        tenant = create_tenant(client, prop["PropertyID"])

        resp = client.put(f"/api/tenants/{tenant['TenantID']}", json={})

        assert resp.status_code == 400
        assert resp.json() == {"error": "No fields to update"}

    def test_update_rejects_negative_rent_due(self, client):
        prop = create_property(client)
        tenant = create_tenant(client, prop["PropertyID"])

        resp = client.put(f"/api/tenants/{tenant['TenantID']}", json={"rentDue": -1})

        assert resp.status_code == 400
        assert resp.json() == {"error": "Rent due must be non-negative"}
        assert client.get(f"/api/tenants/{tenant['TenantID']}").json() == tenant

    def test_update_missing_tenant_returns_404(self, client):
        resp = client.put("/api/tenants/999", json={"name": "X"})
        assert resp.status_code == 404
        assert resp.json() == {"error": "Tenant not found"}

    def test_delete(self, client):
        prop = create_property(client)
        tenant = create_tenant(client, prop["PropertyID"])

        resp = client.delete(f"/api/tenants/{tenant['TenantID']}")

        assert resp.status_code == 200
        assert resp.json() == {"message": "Tenant deleted successfully"}
        assert client.get(f"/api/tenants/{tenant['TenantID']}").status_code == 404

    def test_delete_missing_returns_404(self, client):
        resp = client.delete("/api/tenants/999")
        assert resp.status_code == 404
        assert resp.json() == {"error": "Tenant not found"}


def test_property_and_tenant_lifecycle(client):
    prop = create_property(client, address="1 A St", listingPrice=100000, rent=900)
    property_id = prop["PropertyID"]

    tenant = create_tenant(client, property_id, name="T", rentDue=900)
    assert tenant["property_address"] == "1 A St"

    summary = client.get(f"/api/properties/{property_id}").json()
    assert summary["tenant_count"] == 1
    assert summary["tenant_names"] == "T"

    assert client.delete(f"/api/tenants/{tenant['TenantID']}").status_code == 200
    assert client.delete(f"/api/properties/{property_id}").status_code == 200
    assert client.get(f"/api/properties/{property_id}").status_code == 404
    assert client.get(f"/api/properties/{property_id}/tenants").json() == []


class TestTenantIdRange:

    @pytest.mark.parametrize(
        "method, path",
        [
            ("get", f"/api/tenants/{2**63}"),
            ("delete", f"/api/tenants/{2**63}"),
            ("get", f"/api/properties/{2**63}/tenants"),
        ],
    )
    def test_id_beyond_store_range_is_a_400(self, client, method, path):
        resp = getattr(client, method)(path)

        assert resp.status_code == 400
        assert "error" in resp.json()

    def test_create_with_property_id_beyond_store_range_is_a_400(self, client):
        resp = client.post("/api/tenants", json={"name": "T", "rentDue": 1, "propertyId": 2**63})

        assert resp.status_code == 400
        assert "propertyId" in resp.json()["error"]
        assert client.get("/api/tenants").json() == []

    def test_boolean_property_id_is_rejected(self, client):
        create_property(client)

        resp = client.post("/api/tenants", json={"name": "T", "rentDue": 1, "propertyId": True})

        assert resp.status_code == 400
        assert client.get("/api/tenants").json() == []

    def test_boolean_rent_due_is_rejected(self, client):
        prop = create_property(client)

        resp = client.post(
            "/api/tenants",
            json={"name": "T", "rentDue": False, "propertyId": prop["PropertyID"]},
        )

        assert resp.status_code == 400
        assert "rentDue" in resp.json()["error"]

    def test_large_integral_rent_due_comes_back_unchanged(self, client):
        prop = create_property(client)

        tenant = create_tenant(client, prop["PropertyID"], rentDue=9007199254740993)

        assert tenant["RentDue"] == 9007199254740993

    def test_long_name_is_accepted(self, client):
        prop = create_property(client)

        tenant = create_tenant(client, prop["PropertyID"], name="N" * 300)

        assert tenant["Name"] == "N" * 300
