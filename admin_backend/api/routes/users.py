"""API routes for user management.

Provides listing, CRUD and invitation endpoints for user accounts.
All endpoints use /api/v1/users prefix.
"""

from fastapi import APIRouter, Depends, Query

from admin_backend.api.dependencies import get_admin_handler, get_page_params
from admin_backend.api.schemas import (
    UserCreate,
    UserInvite,
    UserListResponse,
    UserResponse,
    UserUpdate,
)
from admin_backend.db.models import UserRole, UserStatus
from admin_backend.services.admin_handler import AdminHandler
from admin_backend.services.listing import PageParams

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=UserListResponse, response_model_exclude_none=True)
def list_users(
    status: list[UserStatus] | None = Query(None),
    role: list[UserRole] | None = Query(None),
    username: str | None = None,
    params: PageParams = Depends(get_page_params),
    handler: AdminHandler = Depends(get_admin_handler),
) -> UserListResponse:
    """List users, newest first.

    Args:
        status: Repeatable status filter.
        role: Repeatable role filter.
        username: Case-insensitive username substring.
        params: Page and page size (injected).
        handler: AdminHandler (injected).

    Returns:
        One page of users with pagination metadata.
    """
    return handler.list_users(params, status=status, role=role, username=username)


@router.post(
    "",
    response_model=UserResponse,
    status_code=201,
    response_model_exclude_none=True,
)
def create_user(
    data: UserCreate,
    handler: AdminHandler = Depends(get_admin_handler),
) -> UserResponse:
    """Create a user. 409 if the email or derived username exists."""
    return handler.create_user(data)


@router.post(
    "/invite",
    response_model=UserResponse,
    status_code=201,
    response_model_exclude_none=True,
)
def invite_user(
    data: UserInvite,
    handler: AdminHandler = Depends(get_admin_handler),
) -> UserResponse:
    """Invite a user by email. The account starts in the invited state."""
    return handler.invite_user(data)


@router.get("/{user_id}", response_model=UserResponse, response_model_exclude_none=True)
def get_user(
    user_id: str,
    handler: AdminHandler = Depends(get_admin_handler),
) -> UserResponse:
    return handler.get_user(user_id)


@router.put("/{user_id}", response_model=UserResponse, response_model_exclude_none=True)
def update_user(
    user_id: str,
    data: UserUpdate,
    handler: AdminHandler = Depends(get_admin_handler),
) -> UserResponse:
    """Update the supplied fields of a user; omitted fields are kept."""
    return handler.update_user(user_id, data)


@router.delete("/{user_id}", status_code=204)
def delete_user(
    user_id: str,
    handler: AdminHandler = Depends(get_admin_handler),
) -> None:
    handler.delete_user(user_id)
