"""Per-entity search definitions."""

from app.application.search.definitions.agency_users import AgencyUsersDefinition
from app.application.search.definitions.base import SearchDefinition
from app.application.search.definitions.catalog import (
    CategoriesDefinition,
    CharacteristicsDefinition,
)
from app.application.search.definitions.listing_owners import ListingOwnersDefinition
from app.application.search.definitions.listings import ListingsDefinition
from app.application.search.definitions.purchase_inquiries import (
    PurchaseInquiriesDefinition,
)

__all__ = [
    "SearchDefinition",
    "ListingsDefinition",
    "AgencyUsersDefinition",
    "PurchaseInquiriesDefinition",
    "CategoriesDefinition",
    "CharacteristicsDefinition",
    "ListingOwnersDefinition",
]
