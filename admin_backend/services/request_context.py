"""Per-request cancellation and deadline state.

Each service operation calls ``ensure_active()`` before touching the
database. A request whose client already disconnected fails with
RequestCancelledError and one whose deadline passed fails with
RequestTimeoutError. Queries already running are not interrupted.
"""

import time
from dataclasses import dataclass

from admin_backend.errors import RequestCancelledError, RequestTimeoutError


@dataclass
class RequestContext:
    """Cancellation flag and optional monotonic deadline for one request.

    Attributes:
        cancelled: Set when the client disconnected.
        deadline: ``time.monotonic()`` value after which work is refused.
    """

    cancelled: bool = False
    deadline: float | None = None

    @classmethod
    def with_timeout(cls, seconds: float | None) -> "RequestContext":
        """Build a context whose deadline is ``seconds`` from now."""
        if seconds is None:
            return cls()
        return cls(deadline=time.monotonic() + seconds)

    def cancel(self) -> None:
        self.cancelled = True

    @property
    def expired(self) -> bool:
        return self.deadline is not None and time.monotonic() >= self.deadline

    def ensure_active(self) -> None:
        """Raise if the request was cancelled or its deadline passed.

        Raises:
            RequestCancelledError: Client disconnected.
            RequestTimeoutError: Deadline passed.
        """
        if self.cancelled:
            raise RequestCancelledError()
        if self.expired:
            raise RequestTimeoutError()
