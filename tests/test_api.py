"""Tests for the HTTP API."""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from kosman.api.dependencies import get_store
from kosman.core.config import Settings
from kosman.main import app
from kosman.services.ids import SequentialIdFactory
from kosman.services.kos_store import KosStore
from kosman.services.storage import MemoryKeyValueStore


@pytest.fixture
def store():
    return KosStore(MemoryKeyValueStore(), Settings(), id_factory=SequentialIdFactory("t"))


@pytest.fixture
def client(store):
    """Create a test client with the store overridden."""
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestSettingsEndpoints:
    """Tests for the global tariff endpoints."""

    def test_get_settings(self, client: TestClient) -> None:
        response = client.get("/api/settings")
        assert response.status_code == 200
        assert Decimal(response.json()["cost_per_kwh"]) == Decimal("1500")

    def test_patch_settings(self, client: TestClient) -> None:
        response = client.patch("/api/settings", json={"trash_fee": 27500})
        assert response.status_code == 200
        data = response.json()
        assert Decimal(data["trash_fee"]) == Decimal("27500")
        assert Decimal(data["water_fee"]) == Decimal("50000")


class TestPropertyEndpoints:
    """Tests for property endpoints."""

    def test_list_properties(self, client: TestClient) -> None:
        response = client.get("/api/properties")
        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == ["1", "2"]

    def test_create_property(self, client: TestClient) -> None:
        response = client.post(
            "/api/properties",
            json={"name": "Kos Melati", "address": "Jl. Melati 1"},
        )
        assert response.status_code == 201
        data = response.json()
        assert data["id"] == "t1"
        assert data["name"] == "Kos Melati"
        assert data["settings"] is None

    def test_get_property_not_found(self, client: TestClient) -> None:
        response = client.get("/api/properties/99999")
        assert response.status_code == 404

    def test_update_property(self, client: TestClient) -> None:
        response = client.patch("/api/properties/1", json={"name": "Updated Name"})
        assert response.status_code == 200
        assert response.json()["name"] == "Updated Name"
        assert response.json()["address"] == "Jl. Merdeka No. 10, Jakarta Selatan"

    def test_update_property_null_name_rejected(self, client: TestClient) -> None:
        response = client.patch("/api/properties/1", json={"name": None})
        assert response.status_code == 422

    def test_update_property_clears_override(self, client: TestClient) -> None:
        response = client.patch("/api/properties/2", json={"settings": None})
        assert response.status_code == 200
        assert response.json()["settings"] is None

    def test_update_property_not_found(self, client: TestClient) -> None:
        response = client.patch("/api/properties/99999", json={"name": "X"})
        assert response.status_code == 404

    def test_effective_settings(self, client: TestClient) -> None:
        response = client.get("/api/properties/2/settings")
        assert response.status_code == 200
        assert Decimal(response.json()["cost_per_kwh"]) == Decimal("2000")

    def test_delete_property_cascades_to_rooms(self, client: TestClient) -> None:
        response = client.delete("/api/properties/1")
        assert response.status_code == 204

        assert client.get("/api/properties/1/rooms").json() == []
        assert client.get("/api/rooms/101").status_code == 404
        # Bills of the removed rooms remain
        assert len(client.get("/api/rooms/101/bills").json()) == 2

    def test_delete_property_not_found(self, client: TestClient) -> None:
        assert client.delete("/api/properties/99999").status_code == 404


class TestRoomEndpoints:
    """Tests for room endpoints."""

    def test_rooms_of_property(self, client: TestClient) -> None:
        response = client.get("/api/properties/1/rooms")
        assert [r["id"] for r in response.json()] == ["101", "102", "103"]

    def test_create_room(self, client: TestClient) -> None:
        response = client.post(
            "/api/rooms",
            json={"property_id": "2", "name": "Room A2", "price": 1250000},
        )
        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "available"
        assert Decimal(data["price"]) == Decimal("1250000")

    def test_invalid_status_rejected(self, client: TestClient) -> None:
        response = client.patch("/api/rooms/101", json={"status": "demolished"})
        assert response.status_code == 422

    @pytest.mark.parametrize("field", ["name", "status", "price", "property_id"])
    def test_null_for_required_field_rejected(self, client: TestClient, field: str) -> None:
        response = client.patch("/api/rooms/101", json={field: None})
        assert response.status_code == 422
        assert client.get("/api/rooms/101").json()["name"] == "Room 101"

    def test_null_clears_optional_field(self, client: TestClient) -> None:
        response = client.patch("/api/rooms/101", json={"tenant_name": None})
        assert response.status_code == 200
        assert response.json()["tenant_name"] is None
        assert response.json()["status"] == "occupied"

    def test_update_status(self, client: TestClient) -> None:
        response = client.patch("/api/rooms/102", json={"status": "maintenance"})
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "maintenance"
        assert data["name"] == "Room 102"

    def test_readings_newest_first(self, client: TestClient) -> None:
        response = client.get("/api/rooms/101/readings")
        assert [r["period"] for r in response.json()] == ["2026-02", "2026-01", "2025-12"]

    def test_bill_draft(self, client: TestClient) -> None:
        response = client.get("/api/rooms/201/bill-draft", params={"period": "2025-12"})
        assert response.status_code == 200
        data = response.json()
        assert Decimal(data["meter_start"]) == Decimal("800")
        assert Decimal(data["cost_per_kwh"]) == Decimal("2000")
        assert Decimal(data["additional_cost"]) == Decimal("90000")

    def test_bill_draft_unknown_room(self, client: TestClient) -> None:
        response = client.get("/api/rooms/nope/bill-draft", params={"period": "2025-12"})
        assert response.status_code == 404

    def test_bill_draft_invalid_period(self, client: TestClient) -> None:
        response = client.get("/api/rooms/101/bill-draft", params={"period": "2025-13"})
        assert response.status_code == 422


class TestTenantEndpoints:
    """Tests for tenant endpoints."""

    def test_tenant_lifecycle(self, client: TestClient) -> None:
        response = client.post(
            "/api/tenants",
            json={"name": "Andi", "contact": "0811", "id_card_number": "3201", "room_id": "102"},
        )
        assert response.status_code == 201
        tenant_id = response.json()["id"]

        response = client.patch(f"/api/tenants/{tenant_id}", json={"status": "inactive"})
        assert response.json()["status"] == "inactive"
        assert response.json()["room_id"] == "102"

        assert client.delete(f"/api/tenants/{tenant_id}").status_code == 204
        assert client.get(f"/api/tenants/{tenant_id}").status_code == 404

    def test_tenant_null_fields(self, client: TestClient) -> None:
        assert client.patch("/api/tenants/1", json={"status": None}).status_code == 422
        response = client.patch("/api/tenants/1", json={"room_id": None})
        assert response.status_code == 200
        assert response.json()["room_id"] is None


class TestReadingEndpoints:
    """Tests for meter reading endpoints."""

    def test_record_reading(self, client: TestClient) -> None:
        response = client.post(
            "/api/readings",
            json={"room_id": "102", "period": "2026-02", "meter_start": 10, "meter_end": 42},
        )
        assert response.status_code == 201
        reading_id = response.json()["id"]
        assert "recorded_at" in response.json()

        assert client.get("/api/readings").json()[0]["id"] == reading_id
        assert client.delete(f"/api/readings/{reading_id}").status_code == 204
        assert client.delete(f"/api/readings/{reading_id}").status_code == 404


class TestBillEndpoints:
    """Tests for bill endpoints."""

    def test_generate_bill(self, client: TestClient) -> None:
        response = client.post(
            "/api/bills",
            json={
                "room_id": "101",
                "period": "2026-02",
                "meter_start": 1200,
                "meter_end": 1350,
                "cost_per_kwh": 1500,
                "additional_cost": 75000,
            },
        )
        assert response.status_code == 201
        data = response.json()
        assert Decimal(data["usage_cost"]) == Decimal("225000")
        assert Decimal(data["total_amount"]) == Decimal("1800000")
        assert data["is_paid"] is False
        assert client.get("/api/bills").json()[0]["id"] == data["id"]

    def test_generate_bill_unknown_room(self, client: TestClient, store: KosStore) -> None:
        response = client.post(
            "/api/bills",
            json={
                "room_id": "missing",
                "period": "2026-02",
                "meter_start": 0,
                "meter_end": 1,
                "cost_per_kwh": 1500,
            },
        )
        assert response.status_code == 404
        assert response.json()["room_id"] == "missing"
        assert len(store.bills) == 3

    def test_generate_bill_invalid_period(self, client: TestClient) -> None:
        response = client.post(
            "/api/bills",
            json={
                "room_id": "101",
                "period": "February",
                "meter_start": 0,
                "meter_end": 1,
                "cost_per_kwh": 1500,
            },
        )
        assert response.status_code == 422

    def test_pay_bill_twice(self, client: TestClient) -> None:
        first = client.post("/api/bills/b3/pay")
        second = client.post("/api/bills/b3/pay")
        assert first.status_code == 200
        assert second.status_code == 200
        assert second.json()["is_paid"] is True

    def test_pay_missing_bill(self, client: TestClient) -> None:
        assert client.post("/api/bills/missing/pay").status_code == 404

    def test_delete_bill(self, client: TestClient) -> None:
        assert client.delete("/api/bills/b1").status_code == 204
        assert client.get("/api/bills/b1").status_code == 404
