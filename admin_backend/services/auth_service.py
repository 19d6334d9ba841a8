"""Email/password login.

Tokens are opaque ``token_<user id>_<exp>`` strings valid for 24 hours.
There is no session store: logout is a no-op and the current-user
lookup always reports an unauthenticated caller.
"""

import logging
import time

from sqlalchemy.orm import Session

from admin_backend.api.schemas import AuthUser, LoginRequest, LoginResponse
from admin_backend.db.models import User
from admin_backend.errors import InvalidCredentialsError, UnauthorizedError
from admin_backend.services.request_context import RequestContext
from admin_backend.services.security import verify_password

logger = logging.getLogger(__name__)

TOKEN_TTL_SECONDS = 24 * 60 * 60


def generate_access_token(user_id: str, exp: int) -> str:
    return f"token_{user_id}_{exp}"


class AuthService:
    """Login, logout and current-user lookup."""

    def __init__(self, db: Session, ctx: RequestContext | None = None) -> None:
        self.db = db
        self.ctx = ctx or RequestContext()

    def login(self, req: LoginRequest) -> LoginResponse:
        """Check credentials and issue an access token.

        Args:
            req: Email and password.

        Returns:
            The principal and its token.

        Raises:
            InvalidCredentialsError: Unknown email or wrong password.
        """
        self.ctx.ensure_active()
        user = self.db.query(User).filter(User.email == req.email).first()
        if user is None or not verify_password(req.password, user.password):
            logger.info("Failed login for %s", req.email)
            raise InvalidCredentialsError()

        exp = int(time.time()) + TOKEN_TTL_SECONDS
        logger.info("User %s logged in", user.id)
        return LoginResponse(
            user=AuthUser(
                account_no=user.id,
                email=user.email,
                role=[user.role],
                exp=exp,
            ),
            access_token=generate_access_token(user.id, exp),
        )

    def logout(self) -> None:
        self.ctx.ensure_active()

    def get_current_user(self) -> AuthUser:
        """Return the authenticated principal.

        Raises:
            UnauthorizedError: Always; sessions are not tracked.
        """
        self.ctx.ensure_active()
        raise UnauthorizedError()
