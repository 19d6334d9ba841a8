"""Password hashing with bcrypt.

The work factor comes from BCRYPT_ROUNDS (default 12). Tests lower it
to keep hashing fast.
"""

import os

import bcrypt

DEFAULT_BCRYPT_ROUNDS = 12

# Placeholder passwords for accounts created without one.
DEFAULT_USER_PASSWORD = "changeme123"
INVITED_USER_PASSWORD = "invited123"


def _bcrypt_rounds() -> int:
    raw = os.environ.get("BCRYPT_ROUNDS", "").strip()
    return int(raw) if raw else DEFAULT_BCRYPT_ROUNDS


def hash_password(password: str) -> str:
    """Hash a plain password.

    Args:
        password: Plain text password.

    Returns:
        bcrypt hash as text, suitable for the users.password column.
    """
    salt = bcrypt.gensalt(rounds=_bcrypt_rounds())
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """Check a plain password against a stored hash.

    A malformed stored hash counts as a mismatch.
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        return False
