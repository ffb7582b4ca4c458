"""Domain enumerations for the search core.

Enums represent fixed sets of domain values (e.g. searchable entity kinds).
"""

from enum import Enum


class SearchEntity(str, Enum):
    """Searchable entity kinds.

    Closed set: a new searchable entity needs one member here and one
    definition registered in app.application.search.registry.
    """

    LISTINGS = "listings"
    AGENCY_USERS = "agency_users"
    PURCHASE_INQUIRIES = "purchase_inquiries"
    CATEGORIES = "categories"
    CHARACTERISTICS = "characteristics"
    LISTING_OWNERS = "listing_owners"
