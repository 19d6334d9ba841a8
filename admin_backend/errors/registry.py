"""Error code registry.

Every error the API can emit has one entry here: a stable machine code,
a human message, the HTTP status, and the exception types that select
it. Categories group the entries:
- not_found: 404 for a missing entity
- auth: 401 for credential and session failures
- conflict: 409 for uniqueness violations
- request: 400/499/504 for malformed, cancelled or expired requests
- system: 500 fallback
"""

import asyncio
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from admin_backend.errors.domain import (
    AppNotFoundError,
    BadRequestError,
    ChatNotFoundError,
    DuplicateEmailError,
    DuplicateUsernameError,
    InvalidCredentialsError,
    RequestCancelledError,
    RequestTimeoutError,
    TaskNotFoundError,
    UnauthorizedError,
    UserNotFoundError,
)

# Client Closed Request (nginx convention, no stdlib constant)
HTTP_CLIENT_CLOSED_REQUEST = 499


class ErrorCategory(str, Enum):
    """Categories for error codes."""

    NOT_FOUND = "not_found"
    AUTH = "auth"
    CONFLICT = "conflict"
    REQUEST = "request"
    SYSTEM = "system"


@dataclass(frozen=True)
class ErrorCode:
    """Definition of an error code with metadata.

    Attributes:
        code: Stable machine-readable code, e.g. USER_NOT_FOUND.
        category: Error category for grouping.
        message: Human-readable message sent to clients.
        http_status: HTTP status code of the response.
        exceptions: Exception types that resolve to this entry. Empty for
            entries only produced by the HTTP layer or as a fallback.
    """

    code: str
    category: ErrorCategory
    message: str
    http_status: int
    exceptions: tuple[type[BaseException], ...] = ()

    def matches(self, exc: BaseException) -> bool:
        """Check whether an exception selects this entry."""
        return bool(self.exceptions) and isinstance(exc, self.exceptions)


# Error registry - all defined error codes, in resolution order
ERROR_REGISTRY: dict[str, ErrorCode] = {
    # Not found (404)
    "USER_NOT_FOUND": ErrorCode(
        code="USER_NOT_FOUND",
        category=ErrorCategory.NOT_FOUND,
        message="User not found",
        http_status=404,
        exceptions=(UserNotFoundError,),
    ),
    "TASK_NOT_FOUND": ErrorCode(
        code="TASK_NOT_FOUND",
        category=ErrorCategory.NOT_FOUND,
        message="Task not found",
        http_status=404,
        exceptions=(TaskNotFoundError,),
    ),
    "APP_NOT_FOUND": ErrorCode(
        code="APP_NOT_FOUND",
        category=ErrorCategory.NOT_FOUND,
        message="App not found",
        http_status=404,
        exceptions=(AppNotFoundError,),
    ),
    "CHAT_NOT_FOUND": ErrorCode(
        code="CHAT_NOT_FOUND",
        category=ErrorCategory.NOT_FOUND,
        message="Chat not found",
        http_status=404,
        exceptions=(ChatNotFoundError,),
    ),
    # Auth (401)
    "INVALID_CREDENTIALS": ErrorCode(
        code="INVALID_CREDENTIALS",
        category=ErrorCategory.AUTH,
        message="Invalid email or password",
        http_status=401,
        exceptions=(InvalidCredentialsError,),
    ),
    "UNAUTHORIZED": ErrorCode(
        code="UNAUTHORIZED",
        category=ErrorCategory.AUTH,
        message="Authentication required",
        http_status=401,
        exceptions=(UnauthorizedError,),
    ),
    # Conflict (409)
    "DUPLICATE_EMAIL": ErrorCode(
        code="DUPLICATE_EMAIL",
        category=ErrorCategory.CONFLICT,
        message="Email already exists",
        http_status=409,
        exceptions=(DuplicateEmailError,),
    ),
    "DUPLICATE_USERNAME": ErrorCode(
        code="DUPLICATE_USERNAME",
        category=ErrorCategory.CONFLICT,
        message="Username already exists",
        http_status=409,
        exceptions=(DuplicateUsernameError,),
    ),
    # Request-level
    "BAD_REQUEST": ErrorCode(
        code="BAD_REQUEST",
        category=ErrorCategory.REQUEST,
        message="Invalid request",
        http_status=400,
        exceptions=(BadRequestError,),
    ),
    "REQUEST_CANCELLED": ErrorCode(
        code="REQUEST_CANCELLED",
        category=ErrorCategory.REQUEST,
        message="Request was cancelled",
        http_status=HTTP_CLIENT_CLOSED_REQUEST,
        exceptions=(RequestCancelledError, asyncio.CancelledError),
    ),
    "REQUEST_TIMEOUT": ErrorCode(
        code="REQUEST_TIMEOUT",
        category=ErrorCategory.REQUEST,
        message="Request timed out",
        http_status=504,
        exceptions=(RequestTimeoutError, TimeoutError),
    ),
    # System (500)
    "INTERNAL_ERROR": ErrorCode(
        code="INTERNAL_ERROR",
        category=ErrorCategory.SYSTEM,
        message="An internal error occurred",
        http_status=500,
    ),
}

# Resolved before any other entry.
_ABORT_CODES = ("REQUEST_CANCELLED", "REQUEST_TIMEOUT")


def get_error(code: str) -> ErrorCode | None:
    """Get error definition by code.

    Args:
        code: Error code such as USER_NOT_FOUND.

    Returns:
        ErrorCode if found, None otherwise.
    """
    return ERROR_REGISTRY.get(code)


def get_errors_by_category(category: ErrorCategory) -> list[ErrorCode]:
    """Get all errors in a category.

    Args:
        category: The error category to filter by.

    Returns:
        List of ErrorCode objects in the specified category.
    """
    return [e for e in ERROR_REGISTRY.values() if e.category == category]


def iter_error_chain(exc: BaseException) -> Iterator[BaseException]:
    """Yield an exception followed by its causes and contexts.

    Follows ``__cause__`` first, then ``__context__`` unless suppressed
    with ``raise ... from None``. Cycles are cut.
    """
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        if current.__cause__ is not None:
            current = current.__cause__
        elif current.__suppress_context__:
            current = None
        else:
            current = current.__context__


def resolve_error(exc: BaseException) -> ErrorCode:
    """Find the registry entry for an exception.

    Cancellation is checked first, then timeout, then every other entry
    in registry order. Each check considers the whole exception chain.

    Args:
        exc: The exception raised while handling a request.

    Returns:
        The matching ErrorCode, or INTERNAL_ERROR when nothing matches.
    """
    chain = list(iter_error_chain(exc))

    for code in _ABORT_CODES:
        entry = ERROR_REGISTRY[code]
        if any(entry.matches(e) for e in chain):
            return entry

    for entry in ERROR_REGISTRY.values():
        if entry.code in _ABORT_CODES:
            continue
        if any(entry.matches(e) for e in chain):
            return entry

    return ERROR_REGISTRY["INTERNAL_ERROR"]
