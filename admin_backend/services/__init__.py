"""Business logic services for the admin backend."""

from admin_backend.services.admin_handler import (
    AdminHandler,
    AdminServices,
    build_admin_handler,
)
from admin_backend.services.listing import PageParams
from admin_backend.services.request_context import RequestContext

__all__ = [
    "AdminHandler",
    "AdminServices",
    "PageParams",
    "RequestContext",
    "build_admin_handler",
]
