"""Error response formatting and the app-wide error handlers.

``ErrorMapper`` is the single place where an exception becomes an HTTP
response. It is constructed with an explicit ``expose_details`` flag so
each deployment decides whether raw error text reaches clients.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError

from admin_backend.errors.domain import DomainError
from admin_backend.errors.registry import (
    ERROR_REGISTRY,
    ErrorCategory,
    ErrorCode,
    resolve_error,
)

logger = logging.getLogger(__name__)


class ErrorResponse(BaseModel):
    """JSON body for every error response."""

    code: str
    message: str
    details: str | None = None


def format_validation_errors(exc: RequestValidationError) -> str:
    """Render request validation errors as one line per field.

    Args:
        exc: Validation error raised by the request decoder.

    Returns:
        Semicolon-separated ``location: message`` pairs.
    """
    parts = []
    for err in exc.errors():
        location = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{location}: {err.get('msg', 'invalid')}")
    return "; ".join(parts)


class ErrorMapper:
    """Resolve exceptions to registry entries and render responses.

    Attributes:
        expose_details: Include the raw error text in ``details``.
    """

    def __init__(self, expose_details: bool) -> None:
        self.expose_details = expose_details

    def build_response(
        self, error: ErrorCode, details: str | None = None
    ) -> JSONResponse:
        """Render an error entry as a JSON response.

        Args:
            error: Registry entry selecting status, code and message.
            details: Raw error text, dropped unless details are exposed.

        Returns:
            JSONResponse with the error body.
        """
        body = ErrorResponse(
            code=error.code,
            message=error.message,
            details=details if self.expose_details and details else None,
        )
        return JSONResponse(
            status_code=error.http_status,
            content=body.model_dump(exclude_none=True),
        )

    def handle(self, exc: BaseException) -> JSONResponse:
        """Classify an exception once and render its response."""
        error = resolve_error(exc)
        if error.category == ErrorCategory.SYSTEM:
            logger.error("Unhandled error: %s", exc, exc_info=exc)
        else:
            logger.info("%s: %s", error.code, exc)
        return self.build_response(error, str(exc))

    def handle_validation(self, exc: RequestValidationError) -> JSONResponse:
        """Render a request decoding failure as BAD_REQUEST."""
        logger.info("BAD_REQUEST: %s", exc.errors())
        return self.build_response(
            ERROR_REGISTRY["BAD_REQUEST"], format_validation_errors(exc)
        )

    def install(self, app: FastAPI) -> None:
        """Register the handlers on a FastAPI app.

        Args:
            app: Application to configure.
        """

        async def _domain_handler(request: Request, exc: Exception) -> JSONResponse:
            return self.handle(exc)

        async def _validation_handler(
            request: Request, exc: Exception
        ) -> JSONResponse:
            return self.handle_validation(exc)  # type: ignore[arg-type]

        app.add_exception_handler(DomainError, _domain_handler)
        app.add_exception_handler(SQLAlchemyError, _domain_handler)
        app.add_exception_handler(RequestValidationError, _validation_handler)
        app.add_exception_handler(Exception, _domain_handler)
