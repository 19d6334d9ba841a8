"""API routes for the app integration catalogue.

All endpoints use /api/v1/apps prefix.
"""

from fastapi import APIRouter, Depends

from admin_backend.api.dependencies import get_admin_handler, get_page_params
from admin_backend.api.schemas import (
    AppListResponse,
    AppListType,
    AppResponse,
    SortOrder,
)
from admin_backend.services.admin_handler import AdminHandler
from admin_backend.services.listing import PageParams

router = APIRouter(prefix="/apps", tags=["apps"])


@router.get("", response_model=AppListResponse, response_model_exclude_none=True)
def list_apps(
    type: AppListType | None = None,
    filter: str | None = None,
    sort: SortOrder | None = None,
    params: PageParams = Depends(get_page_params),
    handler: AdminHandler = Depends(get_admin_handler),
) -> AppListResponse:
    """List apps ordered by name.

    Args:
        type: all, connected or notConnected.
        filter: Case-insensitive substring of the app name.
        sort: asc (default) or desc by name.
        params: Page and page size (injected).
        handler: AdminHandler (injected).

    Returns:
        One page of apps with pagination metadata.
    """
    return handler.list_apps(params, type=type, filter=filter, sort=sort)


@router.post(
    "/{app_id}/connect",
    response_model=AppResponse,
    response_model_exclude_none=True,
)
def connect_app(
    app_id: str,
    handler: AdminHandler = Depends(get_admin_handler),
) -> AppResponse:
    return handler.connect_app(app_id)


@router.post(
    "/{app_id}/disconnect",
    response_model=AppResponse,
    response_model_exclude_none=True,
)
def disconnect_app(
    app_id: str,
    handler: AdminHandler = Depends(get_admin_handler),
) -> AppResponse:
    return handler.disconnect_app(app_id)
