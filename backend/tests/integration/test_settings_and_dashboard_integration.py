"""Integration tests for settings, the ledger endpoints, the dashboard and /health."""

import pytest

from agendapro.core.config import today_local


@pytest.mark.settings
class TestSettings:
    def test_defaults_before_first_save(self, auth_client):
        data = auth_client.get("/settings/").get_json()["data"]

        assert data["saved"] is False
        assert data["working_hours_start"] == "08:00"
        assert data["working_hours_end"] == "18:00"
        assert "sunday" not in data["working_days"]

    def test_save_then_read(self, auth_client):
        response = auth_client.put(
            "/settings/",
            json={"business_name": "Studio Ana", "working_days": ["monday", "friday"]},
        )

        assert response.status_code == 200
        assert response.get_json()["message"] == "Suas alterações foram salvas com sucesso."
        data = auth_client.get("/settings/").get_json()["data"]
        assert data["saved"] is True
        assert data["business_name"] == "Studio Ana"
        assert data["working_days"] == ["monday", "friday"]
        assert data["working_hours_start"] == "08:00"

    def test_invalid_hours(self, auth_client):
        response = auth_client.put(
            "/settings/", json={"working_hours_start": "20:00", "working_hours_end": "09:00"}
        )
        assert response.status_code == 400

    def test_signed_out(self, client):
        assert client.get("/settings/").status_code == 401
        assert client.put("/settings/", json={"phone": "1"}).status_code == 401


@pytest.mark.ledger
class TestLedgerEndpoints:
    def test_manual_debit_reduces_totals(self, auth_client):
        today = today_local().isoformat()
        auth_client.post(
            "/transactions/",
            json={"description": "Tip", "amount": 20, "type": "credit", "date": today},
        )
        auth_client.post(
            "/transactions/",
            json={"description": "Supplies", "amount": 7.5, "type": "debit", "date": today},
        )

        totals = auth_client.get("/transactions/totals").get_json()["data"]

        assert totals["today"] == 12.5
        assert totals["month"] == 12.5

    def test_delete_entry(self, auth_client):
        created = auth_client.post(
            "/transactions/", json={"description": "Tip", "amount": 5, "type": "credit"}
        ).get_json()["data"]

        response = auth_client.delete(f"/transactions/{created['id']}")

        assert response.status_code == 200
        assert auth_client.get("/transactions/").get_json()["data"] == []

    def test_invalid_type(self, auth_client):
        response = auth_client.post(
            "/transactions/", json={"description": "X", "amount": 5, "type": "gift"}
        )
        assert response.status_code == 400


class TestClientsAndServices:
    def test_client_crud(self, auth_client):
        created = auth_client.post("/clients/", json={"name": "Ana"}).get_json()["data"]

        renamed = auth_client.patch(f"/clients/{created['id']}", json={"name": "Ana Paula"})
        assert renamed.get_json()["data"]["name"] == "Ana Paula"

        assert auth_client.delete(f"/clients/{created['id']}").status_code == 200
        assert auth_client.get("/clients/").get_json()["data"] == []

    def test_service_price_edit_keeps_booked_price(self, auth_client):
        client = auth_client.post("/clients/", json={"name": "Ana"}).get_json()["data"]
        service = auth_client.post(
            "/services/", json={"name": "Haircut", "price": 50}
        ).get_json()["data"]
        booked = auth_client.post(
            "/appointments/",
            json={
                "client_id": client["id"],
                "service_id": service["id"],
                "date": today_local().isoformat(),
                "time": "09:00",
            },
        ).get_json()["data"]

        auth_client.patch(
            f"/services/{service['id']}", json={"name": "Haircut Deluxe", "price": 70}
        )

        (appointment,) = auth_client.get("/appointments/").get_json()["data"]
        assert appointment["id"] == booked["id"]
        assert appointment["service_name"] == "Haircut"
        assert appointment["price"] == 50.0

    def test_unknown_patch_field(self, auth_client):
        created = auth_client.post("/clients/", json={"name": "Ana"}).get_json()["data"]
        response = auth_client.patch(f"/clients/{created['id']}", json={"owner_id": "x"})
        assert response.status_code == 400


class TestDashboardAndHealth:
    def test_dashboard_summary(self, auth_client):
        auth_client.post("/clients/", json={"name": "Ana"})
        today = today_local().isoformat()
        auth_client.post(
            "/appointments/",
            json={
                "client_name": "Ana",
                "service_name": "Haircut",
                "price": 50,
                "date": today,
                "time": "14:00",
            },
        )

        data = auth_client.get("/dashboard/").get_json()["data"]

        assert data["date"] == today
        assert len(data["scheduled_today"]) == 1
        assert data["completed_today"] == 0
        assert data["client_count"] == 1
        assert data["totals"] == {"today": 0.0, "week": 0.0, "month": 0.0}

    def test_dashboard_signed_out(self, client):
        assert client.get("/dashboard/").status_code == 401

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.get_json()["data"]["database"] == "ok"

    def test_unknown_route_uses_envelope(self, client):
        response = client.get("/nope")

        assert response.status_code == 404
        assert response.get_json()["success"] is False
