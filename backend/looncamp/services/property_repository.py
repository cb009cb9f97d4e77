"""CRUD over properties and their ordered image lists.

The repository owns every rule about property rows: slug derivation and
uniqueness, creation defaults, partial-update semantics, and cleanup of the
image rows a property owns. It only flushes; the request's ``get_db``
dependency commits or rolls back.
"""

import logging
import uuid
from collections.abc import Sequence

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from looncamp.errors import ErrorCode, NotFoundError, ValidationError, duplicate_slug
from looncamp.models.property import Property, PropertyImage
from looncamp.schemas.property import PropertyCreate, PropertyCreated, PropertyUpdate
from looncamp.services.slug import create_slug

logger = logging.getLogger(__name__)

TOGGLE_FIELDS = frozenset({"is_active", "is_top_selling"})

# Applied on update only when truthy: "", 0 and None all leave the stored value.
_SCALAR_FIELDS = (
    "description",
    "category",
    "location",
    "price",
    "price_note",
    "capacity",
    "max_capacity",
    "rating",
    "check_in_time",
    "check_out_time",
    "contact",
    "address",
)
# Applied on update whenever not None, so False and [] are real values.
_FLAG_FIELDS = ("is_top_selling", "is_active")
_LIST_FIELDS = ("amenities", "highlights", "activities", "policies")

DEFAULT_CAPACITY = 4
DEFAULT_RATING = 4.5
DEFAULT_CHECK_IN = "2:00 PM"
DEFAULT_CHECK_OUT = "11:00 AM"


class PropertyRepository:
    """Property persistence bound to one request-scoped session."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    @staticmethod
    def _with_images():
        # populate_existing: rows already in the session may hold a stale gallery.
        return (
            select(Property)
            .options(selectinload(Property.images))
            .execution_options(populate_existing=True)
        )

    async def list_all(self) -> list[Property]:
        """Every property, newest first."""
        result = await self.db.execute(self._with_images().order_by(Property.created_at.desc()))
        return list(result.scalars().all())

    async def list_public(self) -> list[Property]:
        """Active properties only, top-selling first, then newest first."""
        query = (
            self._with_images()
            .where(Property.is_active.is_(True))
            .order_by(Property.is_top_selling.desc(), Property.created_at.desc())
        )
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get_by_id(self, property_id: uuid.UUID) -> Property:
        result = await self.db.execute(self._with_images().where(Property.id == property_id))
        prop = result.scalar_one_or_none()
        if prop is None:
            raise NotFoundError()
        return prop

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def create(self, fields: PropertyCreate) -> PropertyCreated:
        """Insert a property and its gallery.

        Raises:
            ValidationError: ``missing_field`` without title or category,
                ``duplicate_slug`` when the derived slug is taken.
        """
        if not fields.title or not fields.category:
            raise ValidationError("Title and category are required.", ErrorCode.MISSING_FIELD)

        slug = self._derive_slug(fields.title)
        if await self._slug_taken(slug):
            raise duplicate_slug()

        prop = Property(
            title=fields.title,
            slug=slug,
            description=fields.description or None,
            category=fields.category,
            location=fields.location or None,
            price=fields.price or None,
            price_note=fields.price_note or None,
            capacity=fields.capacity or DEFAULT_CAPACITY,
            max_capacity=fields.max_capacity or None,
            rating=fields.rating or DEFAULT_RATING,
            is_top_selling=bool(fields.is_top_selling),
            is_active=fields.is_active is not False,
            check_in_time=fields.check_in_time or DEFAULT_CHECK_IN,
            check_out_time=fields.check_out_time or DEFAULT_CHECK_OUT,
            contact=fields.contact or None,
            address=fields.address or None,
            amenities=list(fields.amenities or []),
            highlights=list(fields.highlights or []),
            activities=list(fields.activities or []),
            policies=list(fields.policies or []),
        )
        self.db.add(prop)
        await self._flush()

        if fields.images:
            await self._insert_images(prop.id, fields.images)

        logger.info("Created property %s (%s)", prop.id, slug)
        return PropertyCreated(id=prop.id, slug=slug)

    async def update(self, property_id: uuid.UUID, fields: PropertyUpdate) -> None:
        """Apply a partial update.

        ``images`` replaces the whole gallery whenever it is a list, even an
        empty one, and is ignored when omitted.

        Raises:
            NotFoundError: If the property does not exist.
            ValidationError: ``duplicate_slug`` when the new title collides.
        """
        prop = await self.db.get(Property, property_id)
        if prop is None:
            raise NotFoundError()

        if fields.title:
            new_slug = self._derive_slug(fields.title)
            if new_slug != prop.slug:
                if await self._slug_taken(new_slug, exclude_id=property_id):
                    raise duplicate_slug()
                prop.slug = new_slug
            prop.title = fields.title

        for name in _SCALAR_FIELDS:
            value = getattr(fields, name)
            if value:
                setattr(prop, name, value)

        for name in _FLAG_FIELDS:
            value = getattr(fields, name)
            if value is not None:
                setattr(prop, name, value)

        for name in _LIST_FIELDS:
            value = getattr(fields, name)
            if value is not None:
                setattr(prop, name, list(value))

        await self._flush()

        if fields.images is not None:
            await self._delete_images(property_id)
            await self._insert_images(property_id, fields.images)

        logger.info("Updated property %s (%s)", property_id, prop.slug)

    async def delete(self, property_id: uuid.UUID) -> None:
        """Delete a property together with the image rows it owns.

        Raises:
            NotFoundError: If the property does not exist.
        """
        result = await self.db.execute(select(Property.id).where(Property.id == property_id))
        if result.scalar_one_or_none() is None:
            raise NotFoundError()

        await self._delete_images(property_id)
        await self.db.execute(delete(Property).where(Property.id == property_id))
        logger.info("Deleted property %s", property_id)

    async def toggle_field(self, property_id: uuid.UUID, field: str | None, value: bool | None) -> None:
        """Set ``is_active`` or ``is_top_selling``.

        The field name is checked before anything touches the database.

        Raises:
            ValidationError: ``invalid_field`` for any other field name.
            NotFoundError: If the property does not exist.
        """
        if field not in TOGGLE_FIELDS:
            raise ValidationError(
                "Invalid field. Must be is_active or is_top_selling.",
                ErrorCode.INVALID_FIELD,
            )

        prop = await self.db.get(Property, property_id)
        if prop is None:
            raise NotFoundError()

        setattr(prop, field, bool(value))
        await self.db.flush()
        logger.info("Set %s=%s on property %s", field, bool(value), property_id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _derive_slug(title: str) -> str:
        slug = create_slug(title)
        if not slug:
            raise ValidationError(
                "Title must contain at least one letter or digit.",
                ErrorCode.MISSING_FIELD,
            )
        return slug

    async def _slug_taken(self, slug: str, exclude_id: uuid.UUID | None = None) -> bool:
        query = select(Property.id).where(Property.slug == slug)
        if exclude_id is not None:
            query = query.where(Property.id != exclude_id)
        result = await self.db.execute(query.limit(1))
        return result.scalar_one_or_none() is not None

    async def _flush(self) -> None:
        # The unique index on slug catches a create racing past _slug_taken.
        try:
            await self.db.flush()
        except IntegrityError:
            raise duplicate_slug() from None

    async def _insert_images(self, property_id: uuid.UUID, image_urls: Sequence[str]) -> None:
        self.db.add_all(
            PropertyImage(property_id=property_id, image_url=url, display_order=position)
            for position, url in enumerate(image_urls)
        )
        await self.db.flush()

    async def _delete_images(self, property_id: uuid.UUID) -> None:
        await self.db.execute(delete(PropertyImage).where(PropertyImage.property_id == property_id))
