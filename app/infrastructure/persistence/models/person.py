"""Person and Contact ORM models.

A Person is the global identity behind a phone number; a Contact is an
agency's card for that person (name, email), one per agency.
"""

from sqlalchemy import ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import (
    CuidMixin,
    MultiTenantModel,
    TimestampMixin,
)


class Person(CuidMixin, TimestampMixin, Base):
    """Global person. Table: person. normalized_phone is digits only (e.g. 77001234567)."""

    __tablename__ = "person"

    normalized_phone: Mapped[str | None] = mapped_column(
        String(32), unique=True, nullable=True
    )

    contacts: Mapped[list["Contact"]] = relationship(back_populates="person")


class Contact(MultiTenantModel, Base):
    """Agency-scoped contact card. Table: contact. Unique (tenant_id, person_id)."""

    __tablename__ = "contact"

    person_id: Mapped[str] = mapped_column(
        String, ForeignKey("person.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    middle_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)

    person: Mapped[Person] = relationship(back_populates="contacts")

    __table_args__ = (
        UniqueConstraint("tenant_id", "person_id", name="uq_contact_tenant_person"),
    )
