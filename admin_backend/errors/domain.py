"""Typed domain exceptions for API error mapping.

Services raise these instead of returning error values. The error
registry associates each type with a stable code and HTTP status, and
the exception handlers installed on the app resolve them exactly once.

Usage:
    # In service layer
    raise TaskNotFoundError(task_id)

    # Wrapping a storage error keeps the original on __cause__
    except IntegrityError as e:
        raise DuplicateEmailError(email) from e
"""


class DomainError(Exception):
    """Base exception for all domain errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class NotFoundError(DomainError):
    """Resource was not found. Maps to HTTP 404."""

    resource_type = "Resource"

    def __init__(self, identifier: str) -> None:
        super().__init__(f"{self.resource_type} '{identifier}' not found")
        self.identifier = identifier


class UserNotFoundError(NotFoundError):
    resource_type = "User"


class TaskNotFoundError(NotFoundError):
    resource_type = "Task"


class AppNotFoundError(NotFoundError):
    resource_type = "App"


class ChatNotFoundError(NotFoundError):
    resource_type = "Chat"


class AuthError(DomainError):
    """Authentication failure. Maps to HTTP 401."""


class InvalidCredentialsError(AuthError):
    """Email unknown or password mismatch."""

    def __init__(self) -> None:
        super().__init__("invalid credentials")


class UnauthorizedError(AuthError):
    """No authenticated session."""

    def __init__(self) -> None:
        super().__init__("unauthorized")


class ConflictError(DomainError):
    """Resource conflict (e.g., duplicate). Maps to HTTP 409."""


class DuplicateEmailError(ConflictError):
    """Email already belongs to another user."""

    def __init__(self, email: str) -> None:
        super().__init__(f"Email '{email}' already exists")
        self.email = email


class DuplicateUsernameError(ConflictError):
    """Username already belongs to another user."""

    def __init__(self, username: str) -> None:
        super().__init__(f"Username '{username}' already exists")
        self.username = username


class BadRequestError(DomainError):
    """Request failed validation. Maps to HTTP 400."""


class RequestAbortedError(DomainError):
    """Request stopped before the operation ran."""


class RequestCancelledError(RequestAbortedError):
    """Client went away before the operation started."""

    def __init__(self) -> None:
        super().__init__("request cancelled")


class RequestTimeoutError(RequestAbortedError):
    """Request deadline passed before the operation started."""

    def __init__(self) -> None:
        super().__init__("request deadline exceeded")
