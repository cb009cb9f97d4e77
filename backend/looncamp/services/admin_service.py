"""Admin service — credential lookup, login and administrator creation."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from looncamp.auth.jwt import create_access_token
from looncamp.auth.passwords import hash_password, verify_password
from looncamp.errors import AuthError, ErrorCode, ValidationError
from looncamp.models.admin import Admin
from looncamp.schemas.auth import AdminResponse, LoginResponse

logger = logging.getLogger(__name__)

_MISSING_CREDENTIALS = "Email and password are required."


async def get_admin_by_email(db: AsyncSession, email: str) -> Admin | None:
    """Exact, case-sensitive lookup by email."""
    result = await db.execute(select(Admin).where(Admin.email == email))
    return result.scalar_one_or_none()


async def login(db: AsyncSession, email: str | None, password: str | None) -> LoginResponse:
    """Check the credentials and issue a bearer token.

    An unknown email and a wrong password fail identically so callers cannot
    probe which addresses exist.

    Raises:
        ValidationError: If email or password is missing.
        AuthError: ``invalid_credentials`` for any mismatch.
    """
    if not email or not password:
        raise ValidationError(_MISSING_CREDENTIALS, ErrorCode.MISSING_FIELD)

    admin = await get_admin_by_email(db, email)
    if admin is None or not verify_password(password, admin.password_hash):
        logger.info("Rejected login for %s", email)
        raise AuthError("Invalid credentials.", ErrorCode.INVALID_CREDENTIALS)

    token = create_access_token(admin.id, admin.email)
    logger.info("Admin %s logged in", admin.id)
    return LoginResponse(token=token, admin=AdminResponse.model_validate(admin))


async def create_admin(db: AsyncSession, email: str | None, password: str | None) -> AdminResponse:
    """Store a new administrator with a freshly hashed password.

    Raises:
        ValidationError: ``missing_field`` or ``duplicate_email``.
    """
    if not email or not password:
        raise ValidationError(_MISSING_CREDENTIALS, ErrorCode.MISSING_FIELD)

    if await get_admin_by_email(db, email) is not None:
        raise ValidationError("Admin with this email already exists.", ErrorCode.DUPLICATE_EMAIL)

    admin = Admin(email=email, password_hash=hash_password(password))
    db.add(admin)
    try:
        await db.flush()
    except IntegrityError:
        raise ValidationError("Admin with this email already exists.", ErrorCode.DUPLICATE_EMAIL) from None

    logger.info("Created admin %s (%s)", admin.id, admin.email)
    return AdminResponse.model_validate(admin)
