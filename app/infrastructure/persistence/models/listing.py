"""Listing ORM models: listing, its location, and its owners."""

from sqlalchemy import ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import (
    CuidMixin,
    MultiTenantModel,
    TimestampMixin,
)
from app.infrastructure.persistence.models.person import Contact


class Listing(MultiTenantModel, Base):
    """Property listed by an agency. Table: listing."""

    __tablename__ = "listing"

    title: Mapped[str] = mapped_column(String(500), nullable=False)

    location: Mapped["ListingLocation"] = relationship(
        back_populates="listing", uselist=False
    )
    owners: Mapped[list["ListingOwner"]] = relationship(back_populates="listing")


class ListingLocation(CuidMixin, TimestampMixin, Base):
    """Address of a listing. Table: listing_location. At most one per listing."""

    __tablename__ = "listing_location"

    listing_id: Mapped[str] = mapped_column(
        String, ForeignKey("listing.id", ondelete="CASCADE"), nullable=False, unique=True
    )
    country: Mapped[str | None] = mapped_column(String(100), nullable=True)
    region: Mapped[str | None] = mapped_column(String(255), nullable=True)
    city: Mapped[str | None] = mapped_column(String(255), nullable=True)
    street: Mapped[str | None] = mapped_column(String(255), nullable=True)
    house_number: Mapped[str | None] = mapped_column(String(50), nullable=True)

    listing: Mapped[Listing] = relationship(back_populates="location")


class ListingOwner(CuidMixin, TimestampMixin, Base):
    """Owner link between a listing and a contact. Table: listing_owner."""

    __tablename__ = "listing_owner"

    listing_id: Mapped[str] = mapped_column(
        String, ForeignKey("listing.id", ondelete="CASCADE"), nullable=False, index=True
    )
    contact_id: Mapped[str] = mapped_column(
        String, ForeignKey("contact.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    role: Mapped[str] = mapped_column(String(50), nullable=False, default="primary")

    listing: Mapped[Listing] = relationship(back_populates="owners")
    contact: Mapped[Contact] = relationship()

    __table_args__ = (
        UniqueConstraint("listing_id", "contact_id", name="uq_listing_owner_contact"),
    )
