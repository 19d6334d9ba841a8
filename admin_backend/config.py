"""Runtime configuration loaded from the process environment.

Every deploy-time knob lives on ``Settings``. The app factory receives a
``Settings`` instance explicitly so tests and the CLI can build an app
without touching ``os.environ``.

Environment variables:
    DATABASE_URL: SQLAlchemy URL (default sqlite:///./admin.db).
    HIDE_ERROR_DETAILS: Withhold raw error text from error responses.
    REQUEST_TIMEOUT_SECONDS: Per-request deadline checked before each
        service operation. Unset means no deadline.
    ALLOWED_ORIGINS: Comma-separated CORS allowlist. Empty disables CORS.
    HOST / PORT: Bind address for ``admin-backend serve``.
    LOG_LEVEL: Root log level for the application loggers.
    SQL_ECHO: Echo SQL statements to the log.
"""

import logging
import os

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "sqlite:///./admin.db"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean flag from the environment."""
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw in _TRUTHY


def _parse_origins(raw: str) -> list[str]:
    """Split a comma-separated origin list, dropping blanks."""
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


class Settings(BaseModel):
    """Resolved application settings."""

    database_url: str = DEFAULT_DATABASE_URL
    hide_error_details: bool = False
    request_timeout_seconds: float | None = Field(None, gt=0)
    allowed_origins: list[str] = []
    host: str = "127.0.0.1"
    port: int = 8080
    log_level: str = "info"
    sql_echo: bool = False

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, v: str) -> str:
        """Accept any case and reject names logging does not know."""
        level = v.strip().lower()
        if not isinstance(logging.getLevelName(level.upper()), int):
            raise ValueError(f"Unknown log level: {v!r}")
        return level

    @property
    def expose_error_details(self) -> bool:
        """Whether raw error text may be sent to clients."""
        return not self.hide_error_details


def load_settings() -> Settings:
    """Build Settings from environment variables.

    Returns:
        Settings with environment overrides applied over defaults.
    """
    timeout_raw = os.environ.get("REQUEST_TIMEOUT_SECONDS", "").strip()
    settings = Settings(
        database_url=os.environ.get("DATABASE_URL", "").strip() or DEFAULT_DATABASE_URL,
        hide_error_details=_env_flag("HIDE_ERROR_DETAILS"),
        request_timeout_seconds=float(timeout_raw) if timeout_raw else None,
        allowed_origins=_parse_origins(os.environ.get("ALLOWED_ORIGINS", "")),
        host=os.environ.get("HOST", "").strip() or "127.0.0.1",
        port=int(os.environ.get("PORT", "").strip() or 8080),
        log_level=os.environ.get("LOG_LEVEL", "").strip() or "info",
        sql_echo=_env_flag("SQL_ECHO"),
    )
    if settings.hide_error_details:
        logger.debug("Error details are hidden from API responses")
    return settings
