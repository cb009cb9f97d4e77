"""JWT bearer token issuance and verification."""

import uuid
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from looncamp.config import settings
from looncamp.errors import invalid_token
from looncamp.schemas.auth import TokenClaims


def create_access_token(
    admin_id: uuid.UUID | str,
    email: str,
    expires_delta: timedelta | None = None,
) -> str:
    """Create a signed access token for an administrator.

    Args:
        admin_id: The administrator's UUID.
        email: The administrator's email, embedded alongside the id.
        expires_delta: Custom expiration duration. Defaults to
            ``settings.jwt_expire_hours`` hours.

    Returns:
        Encoded JWT string.
    """
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(hours=settings.jwt_expire_hours))
    to_encode = {
        "sub": str(admin_id),
        "email": email,
        "iat": now,
        "exp": expire,
        "type": "access",
    }
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> dict:
    """Decode and verify a JWT token.

    Raises:
        jose.JWTError: If the token is invalid, expired, or malformed.
    """
    return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])


def verify_access_token(token: str) -> TokenClaims:
    """Verify signature and expiry and return the embedded identity.

    Raises:
        AuthError: ``invalid_or_expired`` for any token that cannot be trusted.
    """
    try:
        payload = decode_token(token)
    except JWTError:
        raise invalid_token() from None

    if payload.get("type") != "access":
        raise invalid_token()

    sub: str | None = payload.get("sub")
    email: str | None = payload.get("email")
    if sub is None or email is None:
        raise invalid_token()

    try:
        admin_id = uuid.UUID(sub)
    except ValueError:
        raise invalid_token() from None

    return TokenClaims(admin_id=admin_id, email=email)
