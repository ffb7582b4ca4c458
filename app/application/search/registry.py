"""Registry of search definitions by entity key (read-only after construction)."""

from __future__ import annotations

from collections.abc import Iterable
from types import MappingProxyType

from app.application.search.definitions import (
    AgencyUsersDefinition,
    CategoriesDefinition,
    CharacteristicsDefinition,
    ListingOwnersDefinition,
    ListingsDefinition,
    PurchaseInquiriesDefinition,
    SearchDefinition,
)
from app.domain.enums import SearchEntity
from app.domain.exceptions import UnknownSearchEntityException


class SearchRegistry:
    """Maps SearchEntity to its SearchDefinition.

    The default registry holds one definition per entity; hosts can build
    their own from a different list (e.g. to swap a definition in tests).
    """

    def __init__(self, definitions: Iterable[SearchDefinition]) -> None:
        table: dict[SearchEntity, SearchDefinition] = {}
        for definition in definitions:
            if definition.entity in table:
                raise ValueError(
                    f"Duplicate search definition for {definition.entity.value!r}"
                )
            table[definition.entity] = definition
        self._definitions = MappingProxyType(table)

    def definition_for(self, entity: SearchEntity | str) -> SearchDefinition:
        """Return the definition for entity (enum member or its string value).

        Raises:
            UnknownSearchEntityException: If no definition is registered.
        """
        try:
            key = SearchEntity(entity)
        except ValueError:
            raise UnknownSearchEntityException(entity) from None
        definition = self._definitions.get(key)
        if definition is None:
            raise UnknownSearchEntityException(key)
        return definition

    def entities(self) -> list[SearchEntity]:
        """Registered entity keys, in registration order."""
        return list(self._definitions)


DEFAULT_DEFINITIONS: tuple[SearchDefinition, ...] = (
    ListingsDefinition(),
    AgencyUsersDefinition(),
    PurchaseInquiriesDefinition(),
    CategoriesDefinition(),
    CharacteristicsDefinition(),
    ListingOwnersDefinition(),
)

default_registry = SearchRegistry(DEFAULT_DEFINITIONS)
