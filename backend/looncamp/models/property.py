"""Property model — camping sites, cottages and villas, plus their galleries."""

import uuid

from sqlalchemy import JSON, Boolean, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from looncamp.database import Base, TimestampMixin, UUIDPrimaryKeyMixin


class Property(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """A rentable listing shown on the public site."""

    __tablename__ = "properties"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, default=None)
    category: Mapped[str] = mapped_column(String(50), nullable=False)  # camping, cottage, villa
    location: Mapped[str | None] = mapped_column(String(255), default=None)
    price: Mapped[str | None] = mapped_column(String(100), default=None)
    price_note: Mapped[str | None] = mapped_column(String(255), default=None)
    capacity: Mapped[int] = mapped_column(Integer, default=4, nullable=False)
    max_capacity: Mapped[int | None] = mapped_column(Integer, default=None)
    rating: Mapped[float] = mapped_column(Numeric(2, 1, asdecimal=False), default=4.5, nullable=False)
    is_top_selling: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False, index=True)
    check_in_time: Mapped[str] = mapped_column(String(50), default="2:00 PM", nullable=False)
    check_out_time: Mapped[str] = mapped_column(String(50), default="11:00 AM", nullable=False)
    contact: Mapped[str | None] = mapped_column(String(255), default=None)
    address: Mapped[str | None] = mapped_column(Text, default=None)
    amenities: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    highlights: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    activities: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    policies: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)

    # Images are written by PropertyRepository with explicit statements, so the
    # relationship is read-only.
    images: Mapped[list["PropertyImage"]] = relationship(
        order_by="PropertyImage.display_order",
        lazy="selectin",
        viewonly=True,
    )

    def __repr__(self) -> str:
        return f"<Property(id={self.id}, slug={self.slug!r}, category={self.category!r})>"


class PropertyImage(UUIDPrimaryKeyMixin, Base):
    """One gallery image of a property; ``display_order`` is zero-based."""

    __tablename__ = "property_images"

    property_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("properties.id"),
        nullable=False,
        index=True,
    )
    image_url: Mapped[str] = mapped_column(Text, nullable=False)
    display_order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    def __repr__(self) -> str:
        return f"<PropertyImage(property_id={self.property_id}, order={self.display_order})>"
