"""PurchaseInquiry ORM model. A contact's request to buy a listing."""

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import MultiTenantModel
from app.infrastructure.persistence.models.person import Contact


class PurchaseInquiry(MultiTenantModel, Base):
    """Buy request. Table: purchase_inquiry. Exactly one contact per inquiry."""

    __tablename__ = "purchase_inquiry"

    listing_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("listing.id", ondelete="SET NULL"), nullable=True, index=True
    )
    contact_id: Mapped[str] = mapped_column(
        String, ForeignKey("contact.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    status: Mapped[str] = mapped_column(String(50), nullable=False, default="pending")

    contact: Mapped[Contact] = relationship()
