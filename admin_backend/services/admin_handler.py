"""Single entry point for every admin API operation.

``AdminHandler`` owns one instance of each entity service and forwards
each operation to it. Routes and the CLI build one handler per request
or command through ``build_admin_handler``.
"""

from dataclasses import dataclass

from sqlalchemy.orm import Session

from admin_backend.api.schemas import (
    AppListResponse,
    AppListType,
    AppResponse,
    AuthUser,
    ChatConversationResponse,
    ChatListResponse,
    ChatMessageResponse,
    DashboardOverview,
    DashboardStats,
    LoginRequest,
    LoginResponse,
    RecentSalesResponse,
    SendMessageRequest,
    SortOrder,
    TaskCreate,
    TaskListResponse,
    TaskResponse,
    TaskUpdate,
    UserCreate,
    UserInvite,
    UserListResponse,
    UserResponse,
    UserUpdate,
)
from admin_backend.db.models import TaskPriority, TaskStatus, UserRole, UserStatus
from admin_backend.services.app_service import AppService
from admin_backend.services.auth_service import AuthService
from admin_backend.services.chat_service import ChatService
from admin_backend.services.dashboard_service import DashboardService
from admin_backend.services.listing import PageParams
from admin_backend.services.request_context import RequestContext
from admin_backend.services.task_service import TaskService
from admin_backend.services.user_service import UserService


@dataclass(frozen=True)
class AdminServices:
    """Entity services backing the handler. Every field is required."""

    auth: AuthService
    users: UserService
    tasks: TaskService
    apps: AppService
    chats: ChatService
    dashboard: DashboardService


class AdminHandler:
    """Forward API operations to the owning service."""

    def __init__(self, services: AdminServices) -> None:
        self.services = services

    # Auth

    def login(self, req: LoginRequest) -> LoginResponse:
        return self.services.auth.login(req)

    def logout(self) -> None:
        self.services.auth.logout()

    def get_current_user(self) -> AuthUser:
        return self.services.auth.get_current_user()

    # Users

    def list_users(
        self,
        params: PageParams,
        status: list[UserStatus] | None = None,
        role: list[UserRole] | None = None,
        username: str | None = None,
    ) -> UserListResponse:
        return self.services.users.list_users(
            params, status=status, role=role, username=username
        )

    def get_user(self, user_id: str) -> UserResponse:
        return self.services.users.get_user(user_id)

    def create_user(self, req: UserCreate) -> UserResponse:
        return self.services.users.create_user(req)

    def invite_user(self, req: UserInvite) -> UserResponse:
        return self.services.users.invite_user(req)

    def update_user(self, user_id: str, req: UserUpdate) -> UserResponse:
        return self.services.users.update_user(user_id, req)

    def delete_user(self, user_id: str) -> None:
        self.services.users.delete_user(user_id)

    # Tasks

    def list_tasks(
        self,
        params: PageParams,
        status: list[TaskStatus] | None = None,
        priority: list[TaskPriority] | None = None,
        filter: str | None = None,
    ) -> TaskListResponse:
        return self.services.tasks.list_tasks(
            params, status=status, priority=priority, filter=filter
        )

    def get_task(self, task_id: str) -> TaskResponse:
        return self.services.tasks.get_task(task_id)

    def create_task(self, req: TaskCreate) -> TaskResponse:
        return self.services.tasks.create_task(req)

    def update_task(self, task_id: str, req: TaskUpdate) -> TaskResponse:
        return self.services.tasks.update_task(task_id, req)

    def delete_task(self, task_id: str) -> None:
        self.services.tasks.delete_task(task_id)

    # Apps

    def list_apps(
        self,
        params: PageParams,
        type: AppListType | None = None,
        filter: str | None = None,
        sort: SortOrder | None = None,
    ) -> AppListResponse:
        return self.services.apps.list_apps(params, type=type, filter=filter, sort=sort)

    def connect_app(self, app_id: str) -> AppResponse:
        return self.services.apps.connect_app(app_id)

    def disconnect_app(self, app_id: str) -> AppResponse:
        return self.services.apps.disconnect_app(app_id)

    # Chats

    def list_chats(
        self, params: PageParams, search: str | None = None
    ) -> ChatListResponse:
        return self.services.chats.list_chats(params, search=search)

    def get_chat(self, chat_id: str) -> ChatConversationResponse:
        return self.services.chats.get_chat(chat_id)

    def send_message(
        self, chat_id: str, req: SendMessageRequest
    ) -> ChatMessageResponse:
        return self.services.chats.send_message(chat_id, req)

    # Dashboard

    def get_dashboard_stats(self) -> DashboardStats:
        return self.services.dashboard.get_stats()

    def get_dashboard_overview(self) -> DashboardOverview:
        return self.services.dashboard.get_overview()

    def get_recent_sales(self) -> RecentSalesResponse:
        return self.services.dashboard.get_recent_sales()


def build_admin_handler(
    db: Session, ctx: RequestContext | None = None
) -> AdminHandler:
    """Wire every service to one session and request context.

    Args:
        db: Session shared by all services.
        ctx: Request state; defaults to one that never expires.

    Returns:
        A ready AdminHandler.
    """
    ctx = ctx or RequestContext()
    return AdminHandler(
        AdminServices(
            auth=AuthService(db, ctx),
            users=UserService(db, ctx),
            tasks=TaskService(db, ctx),
            apps=AppService(db, ctx),
            chats=ChatService(db, ctx),
            dashboard=DashboardService(ctx),
        )
    )
