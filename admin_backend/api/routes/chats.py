"""API routes for chat conversations.

All endpoints use /api/v1/chats prefix.
"""

from fastapi import APIRouter, Depends

from admin_backend.api.dependencies import get_admin_handler, get_page_params
from admin_backend.api.schemas import (
    ChatConversationResponse,
    ChatListResponse,
    ChatMessageResponse,
    SendMessageRequest,
)
from admin_backend.services.admin_handler import AdminHandler
from admin_backend.services.listing import PageParams

router = APIRouter(prefix="/chats", tags=["chats"])


@router.get("", response_model=ChatListResponse, response_model_exclude_none=True)
def list_chats(
    search: str | None = None,
    params: PageParams = Depends(get_page_params),
    handler: AdminHandler = Depends(get_admin_handler),
) -> ChatListResponse:
    """List conversations, optionally searching full name and username."""
    return handler.list_chats(params, search=search)


@router.get(
    "/{chat_id}",
    response_model=ChatConversationResponse,
    response_model_exclude_none=True,
)
def get_chat(
    chat_id: str,
    handler: AdminHandler = Depends(get_admin_handler),
) -> ChatConversationResponse:
    return handler.get_chat(chat_id)


@router.post(
    "/{chat_id}/messages",
    response_model=ChatMessageResponse,
    status_code=201,
)
def send_message(
    chat_id: str,
    data: SendMessageRequest,
    handler: AdminHandler = Depends(get_admin_handler),
) -> ChatMessageResponse:
    """Post a message as the current user. 404 if the chat is missing."""
    return handler.send_message(chat_id, data)
