"""Tests for dashboard REST API routes."""

from fastapi.testclient import TestClient


def test_stats(client: TestClient):
    resp = client.get("/api/v1/dashboard/stats")
    assert resp.status_code == 200
    data = resp.json()
    assert data["total_revenue"] == {"value": 45231.89, "change": "+20.1% from last month"}
    assert data["active_now"]["value"] == 573


def test_overview_has_twelve_months(client: TestClient):
    data = client.get("/api/v1/dashboard/overview").json()["data"]
    assert len(data) == 12
    assert data[0] == {"name": "Jan", "total": 4500}
    assert data[-1] == {"name": "Dec", "total": 6800}


def test_recent_sales(client: TestClient):
    body = client.get("/api/v1/dashboard/recent-sales").json()
    assert body["total_sales"] == 2475
    assert len(body["data"]) == 5
    assert body["data"][0]["name"] == "Olivia Martin"
    assert body["data"][0]["amount"] == 1999
