"""Tests for auth REST API routes."""

import time

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from admin_backend.db.models import UserRole
from admin_backend.services.user_service import UserService


def _seed_account(test_db: Session) -> str:
    user = UserService(test_db).create_account(
        email="admin@example.com",
        password="s3cret-pass",
        first_name="Admin",
        last_name="User",
        role=UserRole.superadmin,
    )
    return user.id


def test_login_success(client: TestClient, test_db: Session):
    user_id = _seed_account(test_db)
    resp = client.post("/api/v1/auth/login", json={
        "email": "admin@example.com",
        "password": "s3cret-pass",
    })
    assert resp.status_code == 200
    data = resp.json()
    assert data["user"]["account_no"] == user_id
    assert data["user"]["email"] == "admin@example.com"
    assert data["user"]["role"] == ["superadmin"]
    assert data["user"]["exp"] > time.time()
    assert data["access_token"] == f"token_{user_id}_{data['user']['exp']}"


def test_login_wrong_password_401(client: TestClient, test_db: Session):
    _seed_account(test_db)
    resp = client.post("/api/v1/auth/login", json={
        "email": "admin@example.com",
        "password": "wrong",
    })
    assert resp.status_code == 401
    body = resp.json()
    assert body["code"] == "INVALID_CREDENTIALS"
    assert "access_token" not in body


def test_login_unknown_email_401(client: TestClient):
    resp = client.post("/api/v1/auth/login", json={
        "email": "ghost@example.com",
        "password": "whatever",
    })
    assert resp.status_code == 401
    assert resp.json()["code"] == "INVALID_CREDENTIALS"


def test_created_user_can_log_in_with_default_password(client: TestClient, make_user):
    make_user("worker@example.com")
    resp = client.post("/api/v1/auth/login", json={
        "email": "worker@example.com",
        "password": "changeme123",
    })
    assert resp.status_code == 200


def test_logout(client: TestClient):
    resp = client.post("/api/v1/auth/logout")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_me_is_always_unauthorized(client: TestClient):
    resp = client.get("/api/v1/auth/me")
    assert resp.status_code == 401
    assert resp.json()["code"] == "UNAUTHORIZED"
