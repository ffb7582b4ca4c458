"""Listing search against SQLite: title, owner name, address, distinct, limit."""

import pytest
from sqlalchemy import select

from app.application.dtos.search import SearchContext
from app.domain.enums import SearchEntity
from app.infrastructure.persistence.models import Listing, ListingLocation, ListingOwner
from app.infrastructure.search.collection import SelectCollection

pytestmark = pytest.mark.integration


@pytest.fixture
async def listings(seed):
    """Two listings in one agency: a titled cottage and a flat owned by Ivan Petrov."""
    tenant = await seed.tenant("alpha")
    cottage = Listing(tenant_id=tenant.id, title="Lakeside Cottage")
    flat = Listing(tenant_id=tenant.id, title="City Flat")
    await seed.add(cottage, flat)
    owner = await seed.contact(tenant, "Ivan", "Petrov", middle_name="Sergeevich")
    await seed.add(
        ListingOwner(listing_id=flat.id, contact_id=owner.id),
        ListingLocation(
            listing_id=flat.id,
            country="Kazakhstan",
            city="Almaty",
            street="Abay",
            house_number="10",
        ),
    )
    return tenant, cottage, flat


def _scope(tenant_id: str) -> SelectCollection:
    return SelectCollection(select(Listing).where(Listing.tenant_id == tenant_id))


async def _search(query_service, fetch, tenant_id, query, limit=None):
    result = query_service.search(
        SearchEntity.LISTINGS,
        _scope(tenant_id),
        query,
        SearchContext(tenant_id=tenant_id),
        limit=limit,
    )
    return await fetch(result)


async def test_title_match_returns_only_titled_listing(query_service, fetch, listings) -> None:
    tenant, cottage, _ = listings
    rows = await _search(query_service, fetch, tenant.id, "lakeside")
    assert [r.id for r in rows] == [cottage.id]


async def test_owner_name_match(query_service, fetch, listings) -> None:
    tenant, _, flat = listings
    rows = await _search(query_service, fetch, tenant.id, "petrov")
    assert [r.id for r in rows] == [flat.id]


async def test_case_and_whitespace_do_not_matter(query_service, fetch, listings) -> None:
    tenant, _, _ = listings
    exact = await _search(query_service, fetch, tenant.id, "petrov")
    messy = await _search(query_service, fetch, tenant.id, "  PETROV  ")
    assert [r.id for r in messy] == [r.id for r in exact]


async def test_owner_full_name_spans_name_parts(query_service, fetch, listings) -> None:
    """'last first middle' is one expression, so multi-word queries match across parts."""
    tenant, _, flat = listings
    rows = await _search(query_service, fetch, tenant.id, "Petrov Ivan Serg")
    assert [r.id for r in rows] == [flat.id]


async def test_address_match(query_service, fetch, listings) -> None:
    """Missing region does not null out the address expression."""
    tenant, _, flat = listings
    rows = await _search(query_service, fetch, tenant.id, "almaty abay 10")
    assert [r.id for r in rows] == [flat.id]


async def test_listing_without_owner_or_location_still_matches_title(
    query_service, fetch, listings
) -> None:
    tenant, cottage, _ = listings
    rows = await _search(query_service, fetch, tenant.id, "cottage")
    assert [r.id for r in rows] == [cottage.id]


async def test_no_match_returns_empty(query_service, fetch, listings) -> None:
    tenant, _, _ = listings
    assert await _search(query_service, fetch, tenant.id, "penthouse") == []


async def test_wildcards_in_query_are_literal(query_service, fetch, listings) -> None:
    tenant, _, _ = listings
    assert await _search(query_service, fetch, tenant.id, "%") == []
    assert await _search(query_service, fetch, tenant.id, "_") == []


async def test_blank_query_returns_collection_unchanged(query_service, fetch, listings) -> None:
    tenant, _, _ = listings
    scope = _scope(tenant.id)
    result = query_service.search(SearchEntity.LISTINGS, scope, "   ")
    assert result is scope
    assert len(await fetch(result)) == 2


async def test_listing_with_three_owners_appears_once(query_service, fetch, seed) -> None:
    tenant = await seed.tenant("beta")
    listing = Listing(tenant_id=tenant.id, title="Riverside Villa")
    await seed.add(listing)
    for last_name in ("Ivanov", "Smirnov", "Kuznetsov"):
        contact = await seed.contact(tenant, "Owner", last_name)
        await seed.add(ListingOwner(listing_id=listing.id, contact_id=contact.id))

    rows = await _search(query_service, fetch, tenant.id, "riverside")
    assert [r.id for r in rows] == [listing.id]


async def test_joined_without_distinct_would_duplicate(fetch, seed) -> None:
    """Control: the owners join fans out, which is why listings need distinct."""
    tenant = await seed.tenant("gamma")
    listing = Listing(tenant_id=tenant.id, title="Hill House")
    await seed.add(listing)
    for last_name in ("A", "B", "C"):
        contact = await seed.contact(tenant, "Owner", last_name)
        await seed.add(ListingOwner(listing_id=listing.id, contact_id=contact.id))

    joined = _scope(tenant.id).outer_join("owners.contact")
    assert len(await fetch(joined)) == 3


async def test_limit_caps_results(query_service, fetch, seed) -> None:
    tenant = await seed.tenant("delta")
    await seed.add(*(Listing(tenant_id=tenant.id, title=f"Flat {i}") for i in range(5)))

    assert len(await _search(query_service, fetch, tenant.id, "flat", limit=2)) == 2
    assert len(await _search(query_service, fetch, tenant.id, "flat", limit=0)) == 5
    assert len(await _search(query_service, fetch, tenant.id, "flat", limit=-3)) == 5
    assert len(await _search(query_service, fetch, tenant.id, "flat")) == 5
