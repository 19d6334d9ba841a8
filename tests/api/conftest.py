"""Pytest fixtures for API tests.

Provides test client, database session override, and sample data
fixtures for testing FastAPI endpoints.
"""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from admin_backend.api.main import app
from admin_backend.db.connection import get_db
from admin_backend.db.models import App, ChatConversation, ChatMessage


@pytest.fixture
def client(test_db: Session) -> Generator[TestClient, None, None]:
    """Create a TestClient with overridden database dependency.

    Args:
        test_db: Test database session fixture.

    Yields:
        TestClient configured for testing.
    """

    def override_get_db():
        try:
            yield test_db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def sample_apps(test_db: Session) -> list[App]:
    """Three apps, one of them connected."""
    apps = [
        App(id="slack", name="Slack", desc="Team chat", connected=True),
        App(id="notion", name="Notion", desc="Docs", logo="/logos/notion.svg"),
        App(id="zoom", name="Zoom", desc="Video calls"),
    ]
    test_db.add_all(apps)
    test_db.commit()
    return apps


@pytest.fixture
def sample_chat(test_db: Session) -> ChatConversation:
    """A conversation with two messages."""
    chat = ChatConversation(
        id="conv1",
        username="alex_dev",
        full_name="Alex John",
        title="Backend Dev",
    )
    chat.messages = [
        ChatMessage(sender="alex_dev", message="Hi"),
        ChatMessage(sender="current_user", message="Hello"),
    ]
    test_db.add(chat)
    test_db.commit()
    return chat


@pytest.fixture
def make_user(client: TestClient):
    """Factory that POSTs a user and returns the response body."""

    def _make(email: str, **fields) -> dict:
        body = {"first_name": "Test", "last_name": "User", "email": email, **fields}
        resp = client.post("/api/v1/users", json=body)
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _make


@pytest.fixture
def make_task(client: TestClient):
    """Factory that POSTs a task and returns the response body."""

    def _make(title: str = "Write docs", **fields) -> dict:
        resp = client.post("/api/v1/tasks", json={"title": title, **fields})
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _make
