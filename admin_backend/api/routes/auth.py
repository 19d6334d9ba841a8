"""API routes for login and session endpoints.

Tokens are issued on login but no session is tracked, so /auth/me always
answers 401. All endpoints use /api/v1/auth prefix.
"""

from fastapi import APIRouter, Depends

from admin_backend.api.dependencies import get_admin_handler
from admin_backend.api.schemas import (
    AuthUser,
    LoginRequest,
    LoginResponse,
    StatusResponse,
)
from admin_backend.services.admin_handler import AdminHandler

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
def login(
    data: LoginRequest,
    handler: AdminHandler = Depends(get_admin_handler),
) -> LoginResponse:
    """Exchange email and password for an access token.

    Raises:
        InvalidCredentialsError: 401 on unknown email or wrong password.
    """
    return handler.login(data)


@router.post("/logout", response_model=StatusResponse)
def logout(handler: AdminHandler = Depends(get_admin_handler)) -> StatusResponse:
    handler.logout()
    return StatusResponse(status="ok")


@router.get("/me", response_model=AuthUser)
def get_current_user(handler: AdminHandler = Depends(get_admin_handler)) -> AuthUser:
    return handler.get_current_user()
