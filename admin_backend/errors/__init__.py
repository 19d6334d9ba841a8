"""Error handling framework for the admin backend.

This package provides:
- Typed domain exceptions raised by services
- Error code registry mapping exceptions to HTTP status, code and message
- ErrorMapper, the single exception-to-response translation point

Error categories:
- not_found: missing users, tasks, apps, chats (404)
- auth: invalid credentials, unauthenticated (401)
- conflict: duplicate email or username (409)
- request: bad request (400), cancelled (499), timed out (504)
- system: internal error fallback (500)
"""

from admin_backend.errors.domain import (
    AppNotFoundError,
    AuthError,
    BadRequestError,
    ChatNotFoundError,
    ConflictError,
    DomainError,
    DuplicateEmailError,
    DuplicateUsernameError,
    InvalidCredentialsError,
    NotFoundError,
    RequestAbortedError,
    RequestCancelledError,
    RequestTimeoutError,
    TaskNotFoundError,
    UnauthorizedError,
    UserNotFoundError,
)
from admin_backend.errors.formatter import ErrorMapper, ErrorResponse
from admin_backend.errors.registry import (
    ERROR_REGISTRY,
    ErrorCategory,
    ErrorCode,
    get_error,
    get_errors_by_category,
    resolve_error,
)

__all__ = [
    # Domain exceptions
    "DomainError",
    "NotFoundError",
    "UserNotFoundError",
    "TaskNotFoundError",
    "AppNotFoundError",
    "ChatNotFoundError",
    "AuthError",
    "InvalidCredentialsError",
    "UnauthorizedError",
    "ConflictError",
    "DuplicateEmailError",
    "DuplicateUsernameError",
    "BadRequestError",
    "RequestAbortedError",
    "RequestCancelledError",
    "RequestTimeoutError",
    # Registry
    "ErrorCode",
    "ErrorCategory",
    "ERROR_REGISTRY",
    "get_error",
    "get_errors_by_category",
    "resolve_error",
    # Formatter
    "ErrorMapper",
    "ErrorResponse",
]
