"""Properties API routes — public listing plus the admin CRUD surface."""

import uuid

from fastapi import APIRouter, Depends, status

from looncamp.api.deps import get_current_admin, get_property_repository
from looncamp.schemas.auth import TokenClaims
from looncamp.schemas.common import ApiResponse
from looncamp.schemas.property import (
    PropertyCreate,
    PropertyCreated,
    PropertyResponse,
    PropertyUpdate,
    ToggleStatusRequest,
)
from looncamp.services.property_repository import PropertyRepository

router = APIRouter(prefix="/api/properties", tags=["properties"])

# Every protected route declares the admin dependency before the repository so
# an unauthenticated request is refused before a session is opened.


@router.get(
    "/public-list",
    response_model=ApiResponse[list[PropertyResponse]],
    summary="List active properties for the public site",
)
async def list_public_properties(
    repo: PropertyRepository = Depends(get_property_repository),
) -> ApiResponse[list[PropertyResponse]]:
    """Active properties, top-selling first."""
    properties = await repo.list_public()
    return ApiResponse(data=[PropertyResponse.model_validate(p) for p in properties])


@router.get(
    "/list",
    response_model=ApiResponse[list[PropertyResponse]],
    summary="List every property",
)
async def list_properties(
    _admin: TokenClaims = Depends(get_current_admin),
    repo: PropertyRepository = Depends(get_property_repository),
) -> ApiResponse[list[PropertyResponse]]:
    properties = await repo.list_all()
    return ApiResponse(data=[PropertyResponse.model_validate(p) for p in properties])


@router.post(
    "/create",
    response_model=ApiResponse[PropertyCreated],
    status_code=status.HTTP_201_CREATED,
    summary="Create a new property",
)
async def create_property(
    body: PropertyCreate,
    _admin: TokenClaims = Depends(get_current_admin),
    repo: PropertyRepository = Depends(get_property_repository),
) -> ApiResponse[PropertyCreated]:
    created = await repo.create(body)
    return ApiResponse(message="Property created successfully.", data=created)


@router.put(
    "/update/{property_id}",
    response_model=ApiResponse[None],
    summary="Partially update a property",
)
async def update_property(
    property_id: uuid.UUID,
    body: PropertyUpdate,
    _admin: TokenClaims = Depends(get_current_admin),
    repo: PropertyRepository = Depends(get_property_repository),
) -> ApiResponse[None]:
    """Only fields that are present and set are changed."""
    await repo.update(property_id, body)
    return ApiResponse(message="Property updated successfully.")


@router.delete(
    "/delete/{property_id}",
    response_model=ApiResponse[None],
    summary="Delete a property",
)
async def delete_property(
    property_id: uuid.UUID,
    _admin: TokenClaims = Depends(get_current_admin),
    repo: PropertyRepository = Depends(get_property_repository),
) -> ApiResponse[None]:
    await repo.delete(property_id)
    return ApiResponse(message="Property deleted successfully.")


@router.patch(
    "/toggle-status/{property_id}",
    response_model=ApiResponse[None],
    summary="Set is_active or is_top_selling",
)
async def toggle_status(
    property_id: uuid.UUID,
    body: ToggleStatusRequest,
    _admin: TokenClaims = Depends(get_current_admin),
    repo: PropertyRepository = Depends(get_property_repository),
) -> ApiResponse[None]:
    await repo.toggle_field(property_id, body.field, body.value)
    return ApiResponse(message="Property status updated successfully.")


@router.get(
    "/{property_id}",
    response_model=ApiResponse[PropertyResponse],
    summary="Get a property by ID",
)
async def get_property(
    property_id: uuid.UUID,
    _admin: TokenClaims = Depends(get_current_admin),
    repo: PropertyRepository = Depends(get_property_repository),
) -> ApiResponse[PropertyResponse]:
    prop = await repo.get_by_id(property_id)
    return ApiResponse(data=PropertyResponse.model_validate(prop))
