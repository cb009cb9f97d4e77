"""Pydantic v2 request/response schemas for authentication endpoints."""

import uuid

from pydantic import BaseModel, ConfigDict

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class LoginRequest(BaseModel):
    """Email/password login. Presence is checked by the login flow itself."""

    email: str | None = None
    password: str | None = None


class CreateAdminRequest(BaseModel):
    """Credentials for a new administrator."""

    email: str | None = None
    password: str | None = None


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class AdminResponse(BaseModel):
    """Public administrator information. The password hash is never exposed."""

    id: uuid.UUID
    email: str

    model_config = ConfigDict(from_attributes=True)


class LoginResponse(BaseModel):
    """Bearer token plus the administrator it was issued to."""

    token: str
    admin: AdminResponse


class TokenClaims(BaseModel):
    """Identity carried by a verified bearer token."""

    admin_id: uuid.UUID
    email: str
