"""Database module for admin backend persistence."""

from admin_backend.db.connection import (
    SessionLocal,
    engine,
    get_db,
    get_db_context,
    init_db,
)
from admin_backend.db.models import (
    App,
    Base,
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

__all__ = [
    # Models
    "Base",
    "User",
    "Task",
    "App",
    "ChatConversation",
    "ChatMessage",
    # Enums
    "UserStatus",
    "UserRole",
    "TaskStatus",
    "TaskLabel",
    "TaskPriority",
    # Connection
    "engine",
    "SessionLocal",
    "get_db",
    "get_db_context",
    "init_db",
]
