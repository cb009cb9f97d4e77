"""Auth API router: login and administrator creation."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from looncamp.api.deps import get_current_admin, get_db
from looncamp.schemas.auth import (
    AdminResponse,
    CreateAdminRequest,
    LoginRequest,
    LoginResponse,
    TokenClaims,
)
from looncamp.schemas.common import ApiResponse
from looncamp.services import admin_service

router = APIRouter(prefix="/api/auth", tags=["auth"])


# ---------------------------------------------------------------------------
# POST /login
# ---------------------------------------------------------------------------


@router.post("/login", response_model=ApiResponse[LoginResponse])
async def login(body: LoginRequest, db: AsyncSession = Depends(get_db)) -> ApiResponse[LoginResponse]:
    """Authenticate with email and password and receive a bearer token."""
    result = await admin_service.login(db, body.email, body.password)
    return ApiResponse(message="Login successful.", data=result)


# ---------------------------------------------------------------------------
# POST /create-admin
# ---------------------------------------------------------------------------


@router.post(
    "/create-admin",
    response_model=ApiResponse[AdminResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_admin(
    body: CreateAdminRequest,
    _admin: TokenClaims = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[AdminResponse]:
    """Create another administrator. Requires an existing admin's token."""
    created = await admin_service.create_admin(db, body.email, body.password)
    return ApiResponse(message="Admin created successfully.", data=created)
