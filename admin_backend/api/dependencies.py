"""Shared FastAPI dependencies for the route modules."""

from fastapi import Depends, Query, Request
from sqlalchemy.orm import Session

from admin_backend.api.schemas import DEFAULT_PAGE_SIZE
from admin_backend.db.connection import get_db
from admin_backend.services.admin_handler import AdminHandler, build_admin_handler
from admin_backend.services.listing import PageParams
from admin_backend.services.request_context import RequestContext


async def get_request_context(request: Request) -> RequestContext:
    """Start the deadline clock and record an early client disconnect."""
    settings = request.app.state.settings
    ctx = RequestContext.with_timeout(settings.request_timeout_seconds)
    if await request.is_disconnected():
        ctx.cancel()
    return ctx


def get_admin_handler(
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
) -> AdminHandler:
    """Dependency injector for AdminHandler."""
    return build_admin_handler(db, ctx)


def get_page_params(
    page: int = Query(1, ge=1),
    page_size: int = Query(DEFAULT_PAGE_SIZE, ge=1),
) -> PageParams:
    return PageParams(page=page, page_size=page_size)
