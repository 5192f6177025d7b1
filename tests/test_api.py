"""
Tests for properties, renovations, portfolio and settings API endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from app.main import app

# Database setup is handled by conftest.py


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


# ============================================================================
# PROPERTY API TESTS
# ============================================================================

class TestPropertyAPI:
    """Test property endpoints."""

    def test_list_properties_seeds_sample_data(self, client):
        """First access returns the sample portfolio."""
        response = client.get("/api/properties/")
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 3
        assert data["label"] == "3 properties"
        maple = data["properties"][0]
        assert maple["name"] == "Maple Street Duplex"
        assert maple["equity"] == 55000
        assert maple["equity_percent"] == 19.3
        assert maple["active_renovations"] == 2

    def test_list_properties_by_type(self, client):
        response = client.get("/api/properties/", params={"property_type": "Condo"})
        data = response.json()
        assert [p["name"] for p in data["properties"]] == ["River Bend Condo"]

    def test_create_property(self, client):
        response = client.post(
            "/api/properties/",
            json={
                "name": "Elm Cottage",
                "address": "9 Elm St",
                "type": "Single Family",
                "purchase_price": "$250,000",
                "monthly_rent": 1900,
                "monthly_expenses": 700,
            },
        )
        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Elm Cottage"
        assert data["current_value"] == 250000
        assert data["year_purchased"] == 2026
        assert data["id"].isdigit()

        listing = client.get("/api/properties/").json()
        assert listing["total"] == 4

    def test_create_twice_in_same_millisecond(self, client):
        """Properties created at the same instant still get distinct ids."""
        first = client.post("/api/properties/", json={"name": "A", "purchase_price": 1000})
        second = client.post("/api/properties/", json={"name": "B", "purchase_price": 2000})
        assert first.json()["id"] != second.json()["id"]
        assert int(second.json()["id"]) == int(first.json()["id"]) + 1

        client.delete(f"/api/properties/{first.json()['id']}")
        names = [p["name"] for p in client.get("/api/properties/").json()["properties"]]
        assert "A" not in names
        assert "B" in names

    def test_create_property_missing_name(self, client):
        response = client.post("/api/properties/", json={"purchase_price": 1000})
        assert response.status_code == 422
        assert response.json()["detail"] == "Please enter a property name."

    def test_create_property_missing_price(self, client):
        response = client.post("/api/properties/", json={"name": "Elm"})
        assert response.status_code == 422
        assert response.json()["detail"] == "Please enter the purchase price."

    def test_get_property(self, client):
        response = client.get("/api/properties/2")
        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Oak Park Townhome"
        assert data["active_renovations"] == 1

    def test_get_nonexistent_property(self, client):
        response = client.get("/api/properties/nonexistent-id")
        assert response.status_code == 404

    def test_delete_property_keeps_renovations(self, client):
        """Deleting a property leaves its renovations dangling."""
        response = client.delete("/api/properties/1")
        assert response.status_code == 200
        assert response.json()["deleted"] is True

        assert client.get("/api/properties/1").status_code == 404

        renos = client.get("/api/properties/1/renovations").json()
        assert renos["total"] == 2
        assert renos["property_name"] == "Unknown"

        reno = client.get("/api/renovations/1").json()
        assert reno["property_name"] == "Unknown"

    def test_delete_nonexistent_property(self, client):
        response = client.delete("/api/properties/nonexistent-id")
        assert response.status_code == 404


# ============================================================================
# RENOVATION API TESTS
# ============================================================================

class TestRenovationAPI:
    """Test renovation endpoints."""

    def test_list_renovations_with_chips(self, client):
        response = client.get("/api/renovations/")
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 6
        assert data["active"] == 5
        chips = {c["key"]: c["count"] for c in data["filters"]}
        assert chips == {"all": 6, "pending": 4, "in_progress": 1, "high": 2, "completed": 1}

    def test_list_renovations_filtered(self, client):
        data = client.get("/api/renovations/", params={"filter": "high"}).json()
        assert [r["id"] for r in data["renovations"]] == ["1", "4"]
        assert data["renovations"][0]["status_label"] == "In Progress"

    def test_create_renovation(self, client):
        response = client.post(
            "/api/renovations/",
            json={
                "title": "Deck Rebuild",
                "property_id": "2",
                "estimated_cost": 6500,
                "priority": "high",
                "category": "Exterior",
                "due_date": "2026-06-01",
            },
        )
        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "pending"
        assert data["property_name"] == "Oak Park Townhome"
        assert data["created_at"] == "2026-03-14"
        assert data["estimated_cost_display"] == "$6,500"

    def test_create_renovation_twice_in_same_millisecond(self, client):
        payload = {"title": "Deck", "property_id": "2"}
        ids = [client.post("/api/renovations/", json=payload).json()["id"] for _ in range(3)]
        assert len(set(ids)) == 3
        assert client.get("/api/renovations/").json()["total"] == 9

    def test_create_renovation_requires_property(self, client):
        response = client.post("/api/renovations/", json={"title": "Deck"})
        assert response.status_code == 422
        assert response.json()["detail"] == "Please select a property."

    def test_change_status(self, client):
        response = client.patch(
            "/api/renovations/1/status",
            json={"status": "completed", "actual_cost": 14200},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "completed"
        assert data["actual_cost"] == 14200

        # And back again
        response = client.patch("/api/renovations/1/status", json={"status": "pending"})
        assert response.json()["status"] == "pending"

    def test_change_status_invalid(self, client):
        response = client.patch("/api/renovations/1/status", json={"status": "archived"})
        assert response.status_code == 422

    def test_change_status_cost_without_completion(self, client):
        response = client.patch(
            "/api/renovations/1/status",
            json={"status": "in_progress", "actual_cost": 10},
        )
        assert response.status_code == 422

    def test_delete_renovation(self, client):
        assert client.delete("/api/renovations/3").status_code == 200
        assert client.get("/api/renovations/3").status_code == 404
        assert client.delete("/api/renovations/3").status_code == 404


# ============================================================================
# PORTFOLIO API TESTS
# ============================================================================

class TestPortfolioAPI:
    """Test dashboard and financials endpoints."""

    def test_dashboard(self, client):
        response = client.get("/api/portfolio/dashboard")
        assert response.status_code == 200
        data = response.json()
        assert data["greeting"] == "Good Morning"
        assert data["total_value"] == 783000
        assert data["total_value_display"] == "$783,000"
        assert data["total_equity_display"] == "$138K"
        assert data["roi"] == 21.4
        assert data["monthly_cashflow"] == 3280
        assert data["pending_renovations"] == 4
        assert data["in_progress_renovations"] == 1
        assert data["high_priority_renovations"] == 2
        assert data["renovation_budget_display"] == "$32K"
        assert [a["badge"] for a in data["attention"]] == ["Active", "Urgent"]

    def test_financials(self, client):
        response = client.get("/api/portfolio/financials")
        assert response.status_code == 200
        data = response.json()
        summary = data["summary"]
        assert summary["cap_rate"] == 5.03
        assert summary["cash_on_cash"] == 6.10
        assert summary["renovation_spend"] == 2800
        assert summary["budget_by_category"][0] == {
            "label": "Kitch", "value": 15000, "color": "#E54545",
        }
        assert data["display"]["cap_rate"] == "5.03%"
        assert data["display"]["equity_gain"] == "21.4% gain"
        assert data["open_by_priority"] == {"low": 1, "medium": 2, "high": 2}

    def test_financials_after_clearing_with_empty_portfolio(self, client):
        """An emptied portfolio reports zero rates, not errors."""
        for prop_id in ("1", "2", "3"):
            client.delete(f"/api/properties/{prop_id}")
        data = client.get("/api/portfolio/financials").json()
        assert data["summary"]["cap_rate"] == 0.0
        assert data["display"]["cash_on_cash"] == "0.00%"


# ============================================================================
# SETTINGS API TESTS
# ============================================================================

class TestSettingsAPI:
    """Test onboarding flag and data reset."""

    def test_onboarding_flow(self, client):
        assert client.get("/api/settings/onboarding").json() == {"onboarded": False}
        assert client.post("/api/settings/onboarding").json()["onboarded"] is True
        assert client.get("/api/settings/onboarding").json() == {"onboarded": True}
        client.delete("/api/settings/onboarding")
        assert client.get("/api/settings/onboarding").json() == {"onboarded": False}

    def test_clear_all_data(self, client):
        client.post("/api/properties/", json={"name": "Elm", "purchase_price": 1000})
        client.post("/api/settings/onboarding")

        response = client.post("/api/settings/clear")
        assert response.json() == {"cleared": True}
        assert client.get("/api/settings/onboarding").json() == {"onboarded": False}
        # Cleared store seeds again on next access
        assert client.get("/api/properties/").json()["total"] == 3


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_startup_creates_storage_table(monkeypatch):
    """Entering the app lifespan prepares the database once."""
    calls = []
    monkeypatch.setattr("app.main.init_db", lambda: calls.append("init"))
    with TestClient(app) as client:
        assert client.get("/health").status_code == 200
    assert calls == ["init"]
