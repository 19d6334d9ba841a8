"""Tests for apps REST API routes."""

from fastapi.testclient import TestClient


def test_list_apps_default_name_order(client: TestClient, sample_apps):
    body = client.get("/api/v1/apps").json()
    assert [a["name"] for a in body["data"]] == ["Notion", "Slack", "Zoom"]
    assert body["meta"]["total"] == 3


def test_list_apps_sort_desc(client: TestClient, sample_apps):
    body = client.get("/api/v1/apps", params={"sort": "desc"}).json()
    assert [a["name"] for a in body["data"]] == ["Zoom", "Slack", "Notion"]


def test_list_apps_connected_filter(client: TestClient, sample_apps):
    connected = client.get("/api/v1/apps", params={"type": "connected"}).json()
    assert [a["id"] for a in connected["data"]] == ["slack"]

    not_connected = client.get("/api/v1/apps", params={"type": "notConnected"}).json()
    assert {a["id"] for a in not_connected["data"]} == {"notion", "zoom"}

    every = client.get("/api/v1/apps", params={"type": "all"}).json()
    assert every["meta"]["total"] == 3


def test_list_apps_name_filter(client: TestClient, sample_apps):
    body = client.get("/api/v1/apps", params={"filter": "ZO"}).json()
    assert [a["id"] for a in body["data"]] == ["zoom"]


def test_list_apps_invalid_type_400(client: TestClient, sample_apps):
    assert client.get("/api/v1/apps", params={"type": "bogus"}).status_code == 400


def test_logo_omitted_when_empty(client: TestClient, sample_apps):
    body = client.get("/api/v1/apps").json()
    by_id = {a["id"]: a for a in body["data"]}
    assert by_id["notion"]["logo"] == "/logos/notion.svg"
    assert "logo" not in by_id["zoom"]


def test_connect_and_disconnect(client: TestClient, sample_apps):
    resp = client.post("/api/v1/apps/zoom/connect")
    assert resp.status_code == 200
    assert resp.json()["connected"] is True

    resp = client.post("/api/v1/apps/zoom/disconnect")
    assert resp.status_code == 200
    assert resp.json()["connected"] is False


def test_connect_is_idempotent(client: TestClient, sample_apps):
    client.post("/api/v1/apps/slack/connect")
    resp = client.post("/api/v1/apps/slack/connect")
    assert resp.json()["connected"] is True


def test_connect_missing_app_404(client: TestClient):
    resp = client.post("/api/v1/apps/nope/connect")
    assert resp.status_code == 404
    assert resp.json()["code"] == "APP_NOT_FOUND"
