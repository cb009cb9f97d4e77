"""FastAPI authentication dependency for route protection."""

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from looncamp.auth.jwt import verify_access_token
from looncamp.errors import missing_token
from looncamp.schemas.auth import TokenClaims

# auto_error is off so a missing header becomes our own 401 envelope
_bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_admin(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer_scheme),
) -> TokenClaims:
    """Validate the Bearer token and return the administrator it identifies.

    Verification is stateless: the admins table is not consulted.

    Raises:
        AuthError 401: If no bearer token is supplied.
        AuthError 403: If the token is malformed, badly signed, or expired.
    """
    if credentials is None or not credentials.credentials:
        raise missing_token()
    return verify_access_token(credentials.credentials)
