"""Row to response conversion for every entity.

Optional text columns are stored as empty strings; they map to None so
the response omits them instead of sending "". Enum columns become the
enum member when the stored value is known and pass through as the raw
string otherwise.
"""

from enum import Enum
from typing import TypeVar

from admin_backend.api.schemas import (
    AppResponse,
    ChatConversationResponse,
    ChatMessageResponse,
    TaskResponse,
    UserResponse,
)
from admin_backend.db.models import (
    App,
    ChatConversation,
    ChatMessage,
    Task,
    TaskLabel,
    TaskPriority,
    TaskStatus,
    User,
    UserRole,
    UserStatus,
)

E = TypeVar("E", bound=Enum)


def optional_text(value: str | None) -> str | None:
    """Map empty or missing text to None."""
    return value or None


def narrow_enum(enum_cls: type[E], value: str) -> E | str:
    """Return the enum member for a stored value, or the value unchanged."""
    try:
        return enum_cls(value)
    except ValueError:
        return value


def user_to_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        first_name=user.first_name,
        last_name=user.last_name,
        username=user.username,
        email=user.email,
        phone_number=optional_text(user.phone_number),
        status=narrow_enum(UserStatus, user.status),
        role=narrow_enum(UserRole, user.role),
        created_at=optional_text(user.created_at),
        updated_at=optional_text(user.updated_at),
    )


def task_to_response(task: Task) -> TaskResponse:
    return TaskResponse(
        id=task.id,
        title=task.title,
        status=narrow_enum(TaskStatus, task.status),
        label=narrow_enum(TaskLabel, task.label),
        priority=narrow_enum(TaskPriority, task.priority),
        assignee=optional_text(task.assignee),
        description=optional_text(task.description),
        due_date=task.due_date,
        created_at=optional_text(task.created_at),
        updated_at=optional_text(task.updated_at),
    )


def app_to_response(app: App) -> AppResponse:
    return AppResponse(
        id=app.id,
        name=app.name,
        desc=app.desc,
        logo=optional_text(app.logo),
        connected=app.connected,
    )


def message_to_response(message: ChatMessage) -> ChatMessageResponse:
    return ChatMessageResponse(
        sender=message.sender,
        message=message.message,
        timestamp=message.timestamp,
    )


def conversation_to_response(
    conversation: ChatConversation,
) -> ChatConversationResponse:
    """Map a conversation and its loaded messages, oldest first."""
    return ChatConversationResponse(
        id=conversation.id,
        username=conversation.username,
        full_name=conversation.full_name,
        title=optional_text(conversation.title),
        profile=optional_text(conversation.profile),
        messages=[message_to_response(m) for m in conversation.messages],
    )
