"""Search core: expression tree, query parser, definitions and registry."""

from app.application.search.definitions import SearchDefinition
from app.application.search.query_parser import QueryParser, mask_pii
from app.application.search.registry import SearchRegistry, default_registry

__all__ = [
    "QueryParser",
    "SearchDefinition",
    "SearchRegistry",
    "default_registry",
    "mask_pii",
]
