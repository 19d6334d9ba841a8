"""Tests for the AdminHandler dispatch facade."""

from dataclasses import FrozenInstanceError
from unittest.mock import MagicMock

import pytest
from sqlalchemy.orm import Session

from admin_backend.api.schemas import TaskCreate, UserInvite
from admin_backend.services.admin_handler import (
    AdminHandler,
    AdminServices,
    build_admin_handler,
)
from admin_backend.services.listing import PageParams


def _mock_services() -> AdminServices:
    return AdminServices(
        auth=MagicMock(),
        users=MagicMock(),
        tasks=MagicMock(),
        apps=MagicMock(),
        chats=MagicMock(),
        dashboard=MagicMock(),
    )


def test_missing_service_is_rejected():
    with pytest.raises(TypeError):
        AdminServices(  # type: ignore[call-arg]
            auth=MagicMock(),
            users=MagicMock(),
            tasks=MagicMock(),
            apps=MagicMock(),
            chats=MagicMock(),
        )


def test_services_are_frozen():
    services = _mock_services()
    with pytest.raises(FrozenInstanceError):
        services.users = MagicMock()  # type: ignore[misc]


def test_delegates_to_owning_service():
    services = _mock_services()
    handler = AdminHandler(services)

    handler.connect_app("slack")
    services.apps.connect_app.assert_called_once_with("slack")

    handler.delete_task("TASK-0001")
    services.tasks.delete_task.assert_called_once_with("TASK-0001")

    handler.get_recent_sales()
    services.dashboard.get_recent_sales.assert_called_once_with()

    params = PageParams()
    handler.list_chats(params, search="kim")
    services.chats.list_chats.assert_called_once_with(params, search="kim")


def test_built_handler_round_trip(test_db: Session):
    handler = build_admin_handler(test_db)
    invited = handler.invite_user(UserInvite(email="inv@example.com"))
    assert handler.get_user(invited.id).email == "inv@example.com"

    task = handler.create_task(TaskCreate(title="wired"))
    assert handler.list_tasks(PageParams()).data[0].id == task.id
