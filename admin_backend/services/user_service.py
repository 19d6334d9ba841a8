"""Service for user account listing and CRUD.

Usernames are derived from the email local part. Email and username are
unique; conflicts raise DuplicateEmailError or DuplicateUsernameError,
both before the insert and, for races, from the database constraint.

Example:
    svc = UserService(db)
    user = svc.create_user(UserCreate(first_name="Ada", last_name="L",
                                      email="ada@example.com"))
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from admin_backend.api.schemas import (
    UserCreate,
    UserInvite,
    UserListResponse,
    UserResponse,
    UserUpdate,
)
from admin_backend.db.models import User, UserRole, UserStatus
from admin_backend.errors import (
    DuplicateEmailError,
    DuplicateUsernameError,
    UserNotFoundError,
)
from admin_backend.services.listing import PageParams, contains, paginate
from admin_backend.services.mappers import user_to_response
from admin_backend.services.request_context import RequestContext
from admin_backend.services.security import (
    DEFAULT_USER_PASSWORD,
    INVITED_USER_PASSWORD,
    hash_password,
)

logger = logging.getLogger(__name__)

INVITED_FIRST_NAME = "Invited"
INVITED_LAST_NAME = "User"

# How each driver names the username unique constraint in its message.
USERNAME_CONSTRAINT_MARKERS = (
    "constraint failed: users.username",  # SQLite
    'constraint "users_username_key"',  # PostgreSQL
    "for key 'users.username'",  # MySQL
)


def username_from_email(email: str) -> str:
    """Return the part of an email address before the first '@'."""
    return email.split("@", 1)[0]


class UserService:
    """Listing and CRUD for user accounts.

    Mutating methods commit their own transaction.

    Attributes:
        db: SQLAlchemy session for database operations.
        ctx: Cancellation state checked before each operation.
    """

    def __init__(self, db: Session, ctx: RequestContext | None = None) -> None:
        """Initialize with a SQLAlchemy session.

        Args:
            db: Active database session.
            ctx: Request state; defaults to one that never expires.
        """
        self.db = db
        self.ctx = ctx or RequestContext()

    def list_users(
        self,
        params: PageParams,
        status: list[UserStatus] | None = None,
        role: list[UserRole] | None = None,
        username: str | None = None,
    ) -> UserListResponse:
        """List users, newest first.

        Args:
            params: Requested page.
            status: Keep users whose status is in this list.
            role: Keep users whose role is in this list.
            username: Case-insensitive substring of the username.

        Returns:
            One page of users with pagination metadata.
        """
        self.ctx.ensure_active()
        query = self.db.query(User)
        if status:
            query = query.filter(User.status.in_([s.value for s in status]))
        if role:
            query = query.filter(User.role.in_([r.value for r in role]))
        if username:
            query = query.filter(contains(User.username, username))

        page = paginate(
            query, params, (User.created_at.desc(), User.id), user_to_response
        )
        logger.debug("Listed %d of %d users", len(page.data), page.meta.total)
        return UserListResponse(data=page.data, meta=page.meta)

    def get_user(self, user_id: str) -> UserResponse:
        """Get a user by id.

        Raises:
            UserNotFoundError: No user has this id.
        """
        self.ctx.ensure_active()
        return user_to_response(self._get_or_raise(user_id))

    def create_user(self, req: UserCreate) -> UserResponse:
        """Create an active user with the default password.

        Args:
            req: Validated create request.

        Returns:
            The created user.

        Raises:
            DuplicateEmailError: Email already registered.
            DuplicateUsernameError: Derived username already taken.
        """
        self.ctx.ensure_active()
        user = self._insert(
            User(
                first_name=req.first_name,
                last_name=req.last_name,
                username=username_from_email(req.email),
                email=req.email,
                password=hash_password(DEFAULT_USER_PASSWORD),
                phone_number=req.phone_number or "",
                status=UserStatus.active.value,
                role=req.role.value,
            )
        )
        logger.info("Created user %s (%s)", user.id, user.username)
        return user_to_response(user)

    def invite_user(self, req: UserInvite) -> UserResponse:
        """Create a placeholder account in the invited state.

        Raises:
            DuplicateEmailError: Email already registered.
            DuplicateUsernameError: Derived username already taken.
        """
        self.ctx.ensure_active()
        user = self._insert(
            User(
                first_name=INVITED_FIRST_NAME,
                last_name=INVITED_LAST_NAME,
                username=username_from_email(req.email),
                email=req.email,
                password=hash_password(INVITED_USER_PASSWORD),
                status=UserStatus.invited.value,
                role=req.role.value,
            )
        )
        logger.info("Invited user %s (%s)", user.id, user.email)
        return user_to_response(user)

    def create_account(
        self,
        email: str,
        password: str,
        first_name: str,
        last_name: str,
        role: UserRole = UserRole.cashier,
    ) -> UserResponse:
        """Create an active user with a chosen password.

        Used by the CLI to provision accounts that can log in.
        """
        self.ctx.ensure_active()
        user = self._insert(
            User(
                first_name=first_name,
                last_name=last_name,
                username=username_from_email(email),
                email=email,
                password=hash_password(password),
                status=UserStatus.active.value,
                role=role.value,
            )
        )
        logger.info("Created account %s (%s)", user.id, user.email)
        return user_to_response(user)

    def update_user(self, user_id: str, req: UserUpdate) -> UserResponse:
        """Apply the supplied fields to a user.

        Fields omitted from the request (or sent as null) keep their
        stored values.

        Raises:
            UserNotFoundError: No user has this id.
            DuplicateEmailError: New email belongs to another user.
        """
        self.ctx.ensure_active()
        user = self._get_or_raise(user_id)
        changes = {
            k: v
            for k, v in req.model_dump(exclude_unset=True, mode="json").items()
            if v is not None
        }

        new_email = changes.get("email")
        if new_email and new_email != user.email and self._email_taken(new_email):
            raise DuplicateEmailError(new_email)

        for field, value in changes.items():
            setattr(user, field, value)
        email, username = user.email, user.username

        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise self._conflict_from(e, email, username) from e
        self.db.refresh(user)
        logger.info("Updated user %s (%s)", user.id, ", ".join(sorted(changes)))
        return user_to_response(user)

    def delete_user(self, user_id: str) -> None:
        """Delete a user.

        Raises:
            UserNotFoundError: No user has this id.
        """
        self.ctx.ensure_active()
        user = self._get_or_raise(user_id)
        self.db.delete(user)
        self.db.commit()
        logger.info("Deleted user %s", user_id)

    def _get_or_raise(self, user_id: str) -> User:
        user = self.db.query(User).filter(User.id == user_id).first()
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def _email_taken(self, email: str) -> bool:
        return self.db.query(User.id).filter(User.email == email).first() is not None

    def _username_taken(self, username: str) -> bool:
        return (
            self.db.query(User.id).filter(User.username == username).first()
            is not None
        )

    def _insert(self, user: User) -> User:
        if self._email_taken(user.email):
            raise DuplicateEmailError(user.email)
        if self._username_taken(user.username):
            raise DuplicateUsernameError(user.username)

        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise self._conflict_from(e, user.email, user.username) from e
        self.db.refresh(user)
        return user

    @staticmethod
    def _conflict_from(
        err: IntegrityError, email: str, username: str
    ) -> DuplicateEmailError | DuplicateUsernameError:
        message = str(err.orig).lower()
        if any(marker in message for marker in USERNAME_CONSTRAINT_MARKERS):
            return DuplicateUsernameError(username)
        return DuplicateEmailError(email)
