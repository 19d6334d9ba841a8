"""API routes for dashboard widgets.

All endpoints use /api/v1/dashboard prefix.
"""

from fastapi import APIRouter, Depends

from admin_backend.api.dependencies import get_admin_handler
from admin_backend.api.schemas import (
    DashboardOverview,
    DashboardStats,
    RecentSalesResponse,
)
from admin_backend.services.admin_handler import AdminHandler

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStats, response_model_exclude_none=True)
def get_stats(handler: AdminHandler = Depends(get_admin_handler)) -> DashboardStats:
    return handler.get_dashboard_stats()


@router.get(
    "/overview",
    response_model=DashboardOverview,
    response_model_exclude_none=True,
)
def get_overview(
    handler: AdminHandler = Depends(get_admin_handler),
) -> DashboardOverview:
    return handler.get_dashboard_overview()


@router.get(
    "/recent-sales",
    response_model=RecentSalesResponse,
    response_model_exclude_none=True,
)
def get_recent_sales(
    handler: AdminHandler = Depends(get_admin_handler),
) -> RecentSalesResponse:
    return handler.get_recent_sales()
