"""Service for chat conversations and their messages."""

import logging

from sqlalchemy import or_
from sqlalchemy.orm import Session, selectinload

from admin_backend.api.schemas import (
    ChatConversationResponse,
    ChatListResponse,
    ChatMessageResponse,
    SendMessageRequest,
)
from admin_backend.db.models import ChatConversation, ChatMessage
from admin_backend.errors import ChatNotFoundError
from admin_backend.services.listing import PageParams, contains, paginate
from admin_backend.services.mappers import (
    conversation_to_response,
    message_to_response,
)
from admin_backend.services.request_context import RequestContext

logger = logging.getLogger(__name__)

# Sender recorded for messages posted through the API.
CURRENT_USER_SENDER = "current_user"


class ChatService:
    """Read conversations and append messages.

    Attributes:
        db: SQLAlchemy session for database operations.
        ctx: Cancellation state checked before each operation.
    """

    def __init__(self, db: Session, ctx: RequestContext | None = None) -> None:
        self.db = db
        self.ctx = ctx or RequestContext()

    def list_chats(
        self, params: PageParams, search: str | None = None
    ) -> ChatListResponse:
        """List conversations with their messages.

        Args:
            params: Requested page.
            search: Case-insensitive substring of the full name or username.

        Returns:
            One page of conversations ordered by id.
        """
        self.ctx.ensure_active()
        query = self.db.query(ChatConversation)
        if search:
            query = query.filter(
                or_(
                    contains(ChatConversation.full_name, search),
                    contains(ChatConversation.username, search),
                )
            )

        page = paginate(
            query, params, (ChatConversation.id,), conversation_to_response
        )
        logger.debug("Listed %d of %d chats", len(page.data), page.meta.total)
        return ChatListResponse(data=page.data, meta=page.meta)

    def get_chat(self, chat_id: str) -> ChatConversationResponse:
        """Get a conversation with all of its messages, oldest first.

        Raises:
            ChatNotFoundError: No conversation has this id.
        """
        self.ctx.ensure_active()
        return conversation_to_response(self._get_or_raise(chat_id))

    def send_message(
        self, chat_id: str, req: SendMessageRequest
    ) -> ChatMessageResponse:
        """Append a message from the current user to a conversation.

        Args:
            chat_id: Conversation to post to.
            req: Validated message body.

        Returns:
            The stored message.

        Raises:
            ChatNotFoundError: No conversation has this id. Nothing is stored.
        """
        self.ctx.ensure_active()
        conversation = self._get_or_raise(chat_id)

        message = ChatMessage(
            chat_id=conversation.id,
            sender=CURRENT_USER_SENDER,
            message=req.message,
        )
        self.db.add(message)
        self.db.commit()
        self.db.refresh(message)
        logger.info("Sent message %d to chat %s", message.id, chat_id)
        return message_to_response(message)

    def _get_or_raise(self, chat_id: str) -> ChatConversation:
        conversation = (
            self.db.query(ChatConversation)
            .options(selectinload(ChatConversation.messages))
            .filter(ChatConversation.id == chat_id)
            .first()
        )
        if conversation is None:
            raise ChatNotFoundError(chat_id)
        return conversation
