"""Pydantic v2 request/response schemas for property endpoints."""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class PropertyFields(BaseModel):
    """Every writable property field. All optional; ``None`` means "not provided"."""

    title: str | None = None
    description: str | None = None
    category: str | None = None
    location: str | None = None
    price: str | None = None
    price_note: str | None = None
    capacity: int | None = None
    max_capacity: int | None = None
    rating: float | None = Field(None, ge=0, le=5)
    is_top_selling: bool | None = None
    is_active: bool | None = None
    check_in_time: str | None = None
    check_out_time: str | None = None
    contact: str | None = None
    address: str | None = None
    amenities: list[str] | None = None
    highlights: list[str] | None = None
    activities: list[str] | None = None
    policies: list[str] | None = None
    images: list[str] | None = None


class PropertyCreate(PropertyFields):
    """Schema for creating a property. ``title`` and ``category`` are checked by the repository."""


class PropertyUpdate(PropertyFields):
    """Schema for partially updating a property."""


class ToggleStatusRequest(BaseModel):
    """Flip one of the two boolean flags. ``field`` is validated by the repository."""

    field: str | None = None
    value: bool | None = None


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class PropertyImageResponse(BaseModel):
    id: uuid.UUID
    image_url: str
    display_order: int

    model_config = ConfigDict(from_attributes=True)


class PropertyResponse(BaseModel):
    """Full property record with its ordered gallery."""

    id: uuid.UUID
    title: str
    slug: str
    description: str | None = None
    category: str
    location: str | None = None
    price: str | None = None
    price_note: str | None = None
    capacity: int
    max_capacity: int | None = None
    rating: float
    is_top_selling: bool
    is_active: bool
    check_in_time: str
    check_out_time: str
    contact: str | None = None
    address: str | None = None
    amenities: list[str] = []
    highlights: list[str] = []
    activities: list[str] = []
    policies: list[str] = []
    images: list[PropertyImageResponse] = []
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PropertyCreated(BaseModel):
    id: uuid.UUID
    slug: str
