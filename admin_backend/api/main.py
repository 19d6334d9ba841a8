"""FastAPI application for the admin backend.

Provides the application factory with routers, middleware and exception
handlers configured, plus a module-level ``app`` built from the process
environment for uvicorn.
"""

import logging
import sys
from contextlib import asynccontextmanager
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version

from fastapi import FastAPI

# Configure logging to stdout for uvicorn to capture
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s:%(name)s:%(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
from fastapi.middleware.cors import CORSMiddleware

from admin_backend.api.routes import apps, auth, chats, dashboard, tasks, users
from admin_backend.config import Settings, load_settings
from admin_backend.db.connection import close_db, init_db
from admin_backend.errors import ErrorMapper

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


def get_version() -> str:
    """Installed package version, or "unknown" when running from source."""
    try:
        return _pkg_version("admin-backend")
    except PackageNotFoundError:
        return "unknown"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables on startup and release the pool on shutdown."""
    init_db()
    logger.info("Admin backend started (version %s)", get_version())
    yield
    close_db()


def create_app(settings: Settings) -> FastAPI:
    """Build the API application.

    Args:
        settings: Resolved configuration for this instance.

    Returns:
        Configured FastAPI app.
    """
    logging.getLogger("admin_backend").setLevel(settings.log_level.upper())

    app = FastAPI(
        title="Admin Backend API",
        description="Admin dashboard backend: users, tasks, apps, chats",
        version=get_version(),
        lifespan=lifespan,
    )
    app.state.settings = settings

    # CORS allowlist is env-driven. If unset, CORS is disabled (same-origin only).
    if settings.allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.allowed_origins,
            allow_credentials=True,
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            allow_headers=["Content-Type", "Authorization"],
        )

    ErrorMapper(expose_details=settings.expose_error_details).install(app)

    # Include routers
    app.include_router(auth.router, prefix=API_PREFIX)
    app.include_router(users.router, prefix=API_PREFIX)
    app.include_router(tasks.router, prefix=API_PREFIX)
    app.include_router(apps.router, prefix=API_PREFIX)
    app.include_router(chats.router, prefix=API_PREFIX)
    app.include_router(dashboard.router, prefix=API_PREFIX)

    @app.get("/health")
    def health_check() -> dict:
        """Liveness probe."""
        return {"status": "healthy", "version": get_version()}

    return app


app = create_app(load_settings())
