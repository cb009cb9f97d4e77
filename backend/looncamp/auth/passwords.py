"""Password hashing and verification using bcrypt directly.

Uses bcrypt directly instead of passlib to avoid compatibility issues
between passlib and bcrypt 4.x+ on Python 3.13.
"""

import bcrypt

from looncamp.config import settings


def hash_password(password: str) -> str:
    """Hash a plain-text password with a fresh salt at the configured work factor.

    Args:
        password: The plain-text password to hash.

    Returns:
        The bcrypt hash string.
    """
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain-text password against a bcrypt hash.

    A malformed stored hash counts as a mismatch.
    """
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"),
            hashed_password.encode("utf-8"),
        )
    except ValueError:
        return False
