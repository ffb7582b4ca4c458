"""Persistence models: ORM entities and mixins."""

from app.infrastructure.persistence.models.catalog import Category, Characteristic
from app.infrastructure.persistence.models.listing import (
    Listing,
    ListingLocation,
    ListingOwner,
)
from app.infrastructure.persistence.models.mixins import (
    CuidMixin,
    MultiTenantModel,
    TenantMixin,
    TimestampMixin,
    generate_cuid,
)
from app.infrastructure.persistence.models.person import Contact, Person
from app.infrastructure.persistence.models.purchase_inquiry import PurchaseInquiry
from app.infrastructure.persistence.models.tenant import Tenant
from app.infrastructure.persistence.models.user import User, UserProfile

__all__ = [
    "Tenant",
    "Person",
    "Contact",
    "User",
    "UserProfile",
    "Listing",
    "ListingLocation",
    "ListingOwner",
    "PurchaseInquiry",
    "Category",
    "Characteristic",
    "CuidMixin",
    "TenantMixin",
    "TimestampMixin",
    "MultiTenantModel",
    "generate_cuid",
]
