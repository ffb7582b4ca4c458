"""Agency users: account fields plus tenant-guarded contact fields."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.application.search.definitions.base import SearchDefinition
from app.application.search.expressions import Column, Expression, full_name
from app.domain.enums import SearchEntity

if TYPE_CHECKING:
    from app.application.dtos.search import SearchContext
    from app.application.interfaces.search import ISearchProvider


class AgencyUsersDefinition(SearchDefinition):
    """Users by email, phone, profile name, and (same tenant) contact card.

    A person has one contact card per agency, so the person->contacts join
    fans out; contact predicates are restricted to the requesting tenant so
    another agency's card for the same person never produces a match.
    """

    entity = SearchEntity.AGENCY_USERS
    requires_distinct = True
    joins = ("profile", "person.contacts")

    def predicates(
        self,
        query: str,
        context: SearchContext,
        provider: ISearchProvider,
    ) -> list[Expression | None]:
        predicates: list[Expression | None] = [
            self._text(provider, Column("app_user", "email"), query),
            self._phone(provider, Column("person", "normalized_phone"), query),
            self._text(provider, full_name("user_profile"), query),
        ]
        tenant_id = context.tenant_id
        if tenant_id:
            guard = Column("contact", "tenant_id")
            predicates.append(
                self._tenant_guarded(
                    guard, tenant_id, self._text(provider, full_name("contact"), query)
                )
            )
            predicates.append(
                self._tenant_guarded(
                    guard, tenant_id, self._text(provider, Column("contact", "email"), query)
                )
            )
        return predicates
