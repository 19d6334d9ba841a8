"""Pydantic schemas for API request/response validation.

This module defines the data contracts for the admin REST API: users,
tasks, apps, chats, auth and dashboard. Optional response fields default
to None and are omitted from JSON bodies, so "not set" never looks like
an empty value.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from admin_backend.db.models import (
    TaskLabel,
    TaskPriority,
    TaskStatus,
    UserRole,
    UserStatus,
)

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"

DEFAULT_PAGE_SIZE = 10


# Enums for API validation


class AppListType(str, Enum):
    """Connection filter for the app catalogue."""

    all = "all"
    connected = "connected"
    not_connected = "notConnected"


class SortOrder(str, Enum):
    """Sort direction."""

    asc = "asc"
    desc = "desc"


# Shared


class PaginationMeta(BaseModel):
    """Pagination metadata for list responses."""

    page: int
    page_size: int
    total: int
    total_pages: int


class StatusResponse(BaseModel):
    """Plain acknowledgement body."""

    status: str


# User schemas


class UserCreate(BaseModel):
    """Request schema for creating a user."""

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN)
    phone_number: str | None = Field(None, max_length=30)
    role: UserRole = UserRole.cashier


class UserUpdate(BaseModel):
    """Request schema for partially updating a user."""

    first_name: str | None = Field(None, min_length=1, max_length=100)
    last_name: str | None = Field(None, min_length=1, max_length=100)
    email: str | None = Field(None, max_length=255, pattern=EMAIL_PATTERN)
    phone_number: str | None = Field(None, max_length=30)
    status: UserStatus | None = None
    role: UserRole | None = None


class UserInvite(BaseModel):
    """Request schema for inviting a user by email."""

    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN)
    role: UserRole = UserRole.cashier


class UserResponse(BaseModel):
    """Response schema for a user."""

    id: str
    first_name: str
    last_name: str
    username: str
    email: str
    phone_number: str | None = None
    status: UserStatus | str = Field(union_mode="left_to_right")
    role: UserRole | str = Field(union_mode="left_to_right")
    created_at: datetime | None = None
    updated_at: datetime | None = None


class UserListResponse(BaseModel):
    """Response schema for listing users."""

    data: list[UserResponse]
    meta: PaginationMeta


# Task schemas


class TaskCreate(BaseModel):
    """Request schema for creating a task."""

    title: str = Field(..., min_length=1, max_length=255)
    status: TaskStatus = TaskStatus.todo
    label: TaskLabel = TaskLabel.feature
    priority: TaskPriority = TaskPriority.medium
    assignee: str | None = Field(None, max_length=150)
    description: str | None = None
    due_date: datetime | None = None


class TaskUpdate(BaseModel):
    """Request schema for partially updating a task."""

    title: str | None = Field(None, min_length=1, max_length=255)
    status: TaskStatus | None = None
    label: TaskLabel | None = None
    priority: TaskPriority | None = None
    assignee: str | None = Field(None, max_length=150)
    description: str | None = None
    due_date: datetime | None = None


class TaskResponse(BaseModel):
    """Response schema for a task."""

    id: str
    title: str
    status: TaskStatus | str = Field(union_mode="left_to_right")
    label: TaskLabel | str = Field(union_mode="left_to_right")
    priority: TaskPriority | str = Field(union_mode="left_to_right")
    assignee: str | None = None
    description: str | None = None
    due_date: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class TaskListResponse(BaseModel):
    """Response schema for listing tasks."""

    data: list[TaskResponse]
    meta: PaginationMeta


# App schemas


class AppResponse(BaseModel):
    """Response schema for an app integration."""

    id: str
    name: str
    desc: str
    logo: str | None = None
    connected: bool


class AppListResponse(BaseModel):
    """Response schema for listing apps."""

    data: list[AppResponse]
    meta: PaginationMeta


# Chat schemas


class ChatMessageResponse(BaseModel):
    """Response schema for a chat message."""

    sender: str
    message: str
    timestamp: datetime


class ChatConversationResponse(BaseModel):
    """Response schema for a conversation with its messages."""

    id: str
    username: str
    full_name: str
    title: str | None = None
    profile: str | None = None
    messages: list[ChatMessageResponse] = []


class ChatListResponse(BaseModel):
    """Response schema for listing conversations."""

    data: list[ChatConversationResponse]
    meta: PaginationMeta


class SendMessageRequest(BaseModel):
    """Request schema for posting a message to a conversation."""

    message: str = Field(..., min_length=1)


# Auth schemas


class LoginRequest(BaseModel):
    """Request schema for email/password login."""

    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1)


class AuthUser(BaseModel):
    """Authenticated principal returned on login."""

    account_no: str
    email: str
    role: list[str]
    exp: int


class LoginResponse(BaseModel):
    """Response schema for a successful login."""

    user: AuthUser
    access_token: str


# Dashboard schemas


class StatValue(BaseModel):
    """One dashboard headline number with its trend text."""

    value: float | None = None
    change: str | None = None


class DashboardStats(BaseModel):
    """Headline dashboard statistics."""

    total_revenue: StatValue
    subscriptions: StatValue
    sales: StatValue
    active_now: StatValue


class OverviewItem(BaseModel):
    """Monthly revenue point."""

    name: str | None = None
    total: float | None = None


class DashboardOverview(BaseModel):
    """Revenue overview chart data."""

    data: list[OverviewItem]


class RecentSale(BaseModel):
    """Recent sale row."""

    name: str
    email: str
    avatar: str | None = None
    amount: float


class RecentSalesResponse(BaseModel):
    """Recent sales with the period's sale count."""

    data: list[RecentSale]
    total_sales: int
