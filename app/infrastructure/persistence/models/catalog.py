"""Catalog ORM models: listing categories and characteristics (per tenant)."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import MultiTenantModel


class Category(MultiTenantModel, Base):
    """Listing category (e.g. apartment, house). Table: category."""

    __tablename__ = "category"

    title: Mapped[str] = mapped_column(String(255), nullable=False)


class Characteristic(MultiTenantModel, Base):
    """Listing characteristic (e.g. balcony, parking). Table: characteristic."""

    __tablename__ = "characteristic"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
