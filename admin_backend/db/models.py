"""SQLAlchemy ORM models for the admin backend.

Defines users, tasks, app integrations and chat conversations. Uses
SQLAlchemy 2.0 style with Mapped and mapped_column. Timestamps are
ISO8601 UTC strings maintained on insert and update.
"""

from datetime import UTC, datetime
from enum import Enum
from uuid import uuid4

from sqlalchemy import ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    mapped_column,
    relationship,
)

TASK_ID_PREFIX = "TASK-"
TASK_ID_WIDTH = 4


def generate_uuid() -> str:
    """Generate a UUID4 string for primary keys."""
    return str(uuid4())


def utc_now_iso() -> str:
    """Generate current UTC timestamp in ISO8601 format."""
    return datetime.now(UTC).isoformat()


def format_task_id(number: int) -> str:
    """Format a task sequence number as TASK-0001."""
    return f"{TASK_ID_PREFIX}{number:0{TASK_ID_WIDTH}d}"


# Enums matching the database schema constraints


class UserStatus(str, Enum):
    """Account status values."""

    active = "active"
    inactive = "inactive"
    invited = "invited"
    suspended = "suspended"


class UserRole(str, Enum):
    """Role values for access level display."""

    superadmin = "superadmin"
    admin = "admin"
    manager = "manager"
    cashier = "cashier"


class TaskStatus(str, Enum):
    """Workflow status values for tasks."""

    backlog = "backlog"
    todo = "todo"
    in_progress = "in progress"
    done = "done"
    canceled = "canceled"


class TaskLabel(str, Enum):
    """Category labels for tasks."""

    bug = "bug"
    feature = "feature"
    documentation = "documentation"


class TaskPriority(str, Enum):
    """Priority levels for tasks."""

    low = "low"
    medium = "medium"
    high = "high"
    critical = "critical"


# SQLAlchemy Base


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


# Models


class User(Base):
    """Administrable user account.

    Attributes:
        id: UUID primary key.
        username: Unique login name derived from the email local part.
        email: Unique email address.
        password: bcrypt hash, never the plain password.
        phone_number: Optional phone; empty string means not set.
        status: One of UserStatus.
        role: One of UserRole.
    """

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=generate_uuid
    )
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    username: Mapped[str] = mapped_column(String(150), unique=True, nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    phone_number: Mapped[str] = mapped_column(
        String(30), nullable=False, default="", server_default=""
    )
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=UserStatus.active.value
    )
    role: Mapped[str] = mapped_column(
        String(20), nullable=False, default=UserRole.cashier.value
    )
    created_at: Mapped[str] = mapped_column(
        String(50), nullable=False, default=utc_now_iso
    )
    updated_at: Mapped[str] = mapped_column(
        String(50), nullable=False, default=utc_now_iso, onupdate=utc_now_iso
    )

    __table_args__ = (
        Index("idx_users_status", "status"),
        Index("idx_users_role", "role"),
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id!r}, username={self.username!r})>"


class Task(Base):
    """Tracked work item with a human-readable sequential id.

    Attributes:
        id: TASK-XXXX identifier assigned at creation.
        assignee: Optional assignee; empty string means not set.
        description: Optional description; empty string means not set.
        due_date: Optional ISO8601 due date; NULL means not set.
    """

    __tablename__ = "tasks"

    id: Mapped[str] = mapped_column(String(20), primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=TaskStatus.todo.value
    )
    label: Mapped[str] = mapped_column(
        String(20), nullable=False, default=TaskLabel.feature.value
    )
    priority: Mapped[str] = mapped_column(
        String(20), nullable=False, default=TaskPriority.medium.value
    )
    assignee: Mapped[str] = mapped_column(
        String(150), nullable=False, default="", server_default=""
    )
    description: Mapped[str] = mapped_column(
        Text, nullable=False, default="", server_default=""
    )
    due_date: Mapped[str | None] = mapped_column(String(50), nullable=True)
    created_at: Mapped[str] = mapped_column(
        String(50), nullable=False, default=utc_now_iso
    )
    updated_at: Mapped[str] = mapped_column(
        String(50), nullable=False, default=utc_now_iso, onupdate=utc_now_iso
    )

    __table_args__ = (
        Index("idx_tasks_status", "status"),
        Index("idx_tasks_priority", "priority"),
        Index("idx_tasks_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Task(id={self.id!r}, status={self.status!r})>"


class App(Base):
    """Third-party app integration that can be connected or disconnected."""

    __tablename__ = "apps"

    id: Mapped[str] = mapped_column(String(100), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    desc: Mapped[str] = mapped_column(Text, nullable=False)
    logo: Mapped[str] = mapped_column(
        String(255), nullable=False, default="", server_default=""
    )
    connected: Mapped[bool] = mapped_column(
        nullable=False, default=False, server_default="0"
    )
    created_at: Mapped[str] = mapped_column(
        String(50), nullable=False, default=utc_now_iso
    )
    updated_at: Mapped[str] = mapped_column(
        String(50), nullable=False, default=utc_now_iso, onupdate=utc_now_iso
    )

    def __repr__(self) -> str:
        return f"<App(id={self.id!r}, connected={self.connected!r})>"


class ChatConversation(Base):
    """Chat conversation with a single contact.

    Messages are owned by the conversation and loaded in id order.
    """

    __tablename__ = "chat_conversations"

    id: Mapped[str] = mapped_column(String(100), primary_key=True)
    username: Mapped[str] = mapped_column(String(150), nullable=False)
    full_name: Mapped[str] = mapped_column(String(200), nullable=False)
    title: Mapped[str] = mapped_column(
        String(200), nullable=False, default="", server_default=""
    )
    profile: Mapped[str] = mapped_column(
        String(255), nullable=False, default="", server_default=""
    )

    messages: Mapped[list["ChatMessage"]] = relationship(
        "ChatMessage",
        back_populates="conversation",
        cascade="all, delete-orphan",
        order_by="ChatMessage.id",
    )

    def __repr__(self) -> str:
        return f"<ChatConversation(id={self.id!r}, username={self.username!r})>"


class ChatMessage(Base):
    """Single message within a chat conversation."""

    __tablename__ = "chat_messages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    chat_id: Mapped[str] = mapped_column(
        String(100),
        ForeignKey("chat_conversations.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    sender: Mapped[str] = mapped_column(String(150), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    timestamp: Mapped[str] = mapped_column(
        String(50), nullable=False, default=utc_now_iso
    )

    conversation: Mapped["ChatConversation"] = relationship(
        "ChatConversation", back_populates="messages"
    )

    def __repr__(self) -> str:
        return f"<ChatMessage(id={self.id!r}, chat_id={self.chat_id!r})>"
