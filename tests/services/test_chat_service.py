"""Tests for ChatService."""

import pytest
from sqlalchemy.orm import Session

from admin_backend.api.schemas import SendMessageRequest
from admin_backend.db.models import ChatConversation, ChatMessage
from admin_backend.errors import ChatNotFoundError
from admin_backend.services.chat_service import CURRENT_USER_SENDER, ChatService
from admin_backend.services.listing import PageParams


@pytest.fixture
def svc(test_db: Session) -> ChatService:
    conv = ChatConversation(id="c1", username="kim", full_name="Kim Lee", profile="/a.png")
    conv.messages = [ChatMessage(sender="kim", message="first")]
    test_db.add(conv)
    test_db.add(ChatConversation(id="c2", username="max", full_name="Max Power"))
    test_db.commit()
    return ChatService(test_db)


def test_get_chat_maps_optional_fields(svc):
    chat = svc.get_chat("c1")
    assert chat.profile == "/a.png"
    assert chat.title is None
    assert [m.message for m in chat.messages] == ["first"]


def test_send_message_appends_in_order(svc):
    sent = svc.send_message("c1", SendMessageRequest(message="second"))
    assert sent.sender == CURRENT_USER_SENDER
    assert [m.message for m in svc.get_chat("c1").messages] == ["first", "second"]


def test_send_message_missing_chat(svc, test_db):
    with pytest.raises(ChatNotFoundError):
        svc.send_message("nope", SendMessageRequest(message="x"))
    assert test_db.query(ChatMessage).count() == 1


def test_list_search(svc):
    assert [c.id for c in svc.list_chats(PageParams(), search="power").data] == ["c2"]
    assert svc.list_chats(PageParams()).meta.total == 2


def test_deleting_conversation_removes_messages(svc, test_db):
    test_db.delete(test_db.get(ChatConversation, "c1"))
    test_db.commit()
    assert test_db.query(ChatMessage).count() == 0
