"""
Test the HTTP API.
"""

import pytest
from fastapi.testclient import TestClient

from investment_projection.main import app


@pytest.fixture
def client():
    return TestClient(app)


class TestInfoEndpoints:

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "docs" in response.json()

    def test_health(self, client):
        body = client.get("/api/health").json()
        assert body["status"] == "ok"

    def test_default_settings(self, client, default_settings_dict):
        body = client.get("/api/default_settings").json()
        assert body["settings"]["compounding_frequency"] == "monthly"
        assert body["settings"]["investment_period_years"] == default_settings_dict["investment_period_years"]
        assert body["advanced"]["risk_tolerance"] == "moderate"
        assert body["advanced"]["goal_amount"] is None

    def test_risk_profiles(self, client):
        body = client.get("/api/risk_profiles").json()
        assert set(body) == {"conservative", "moderate", "aggressive"}
        assert body["moderate"] == {"mean_return": 0.07, "volatility": 0.12}


class TestProjectEndpoint:

    def test_projection(self, client, default_settings_dict):
        payload = {
            "settings": default_settings_dict,
            "advanced": {"goal_amount": 500_000},
            "seed": 11,
        }
        response = client.post("/api/project", json=payload)
        assert response.status_code == 200, response.text
        body = response.json()
        assert body["total_contributions"] == 180_500
        assert len(body["monthly_breakdown"]) == 360
        assert body["goal_analysis"]["goal_amount"] == 500_000

    def test_seed_reproducible(self, client, default_settings_dict):
        payload = {"settings": default_settings_dict, "advanced": {"goal_amount": 620_000}, "seed": 3}
        first = client.post("/api/project", json=payload).json()
        second = client.post("/api/project", json=payload).json()
        assert first == second

    def test_domain_errors(self, client, default_settings_dict):
        settings = {**default_settings_dict, "initial_amount": -1, "tax_rate": 120}
        response = client.post("/api/project", json={"settings": settings})
        assert response.status_code == 422
        fields = [d["field"] for d in response.json()["detail"]]
        assert fields == ["initial_amount", "tax_rate"]

    def test_schema_errors(self, client, default_settings_dict):
        settings = {**default_settings_dict, "compounding_frequency": "weekly"}
        response = client.post("/api/project", json={"settings": settings})
        assert response.status_code == 422
