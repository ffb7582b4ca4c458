"""Application layer: interfaces, search core, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (collections, providers).
"""

from app.application.interfaces import ISearchCollection, ISearchProvider
from app.application.search import QueryParser, SearchDefinition, SearchRegistry
from app.application.use_cases import QueryService

__all__ = [
    "ISearchCollection",
    "ISearchProvider",
    "QueryParser",
    "QueryService",
    "SearchDefinition",
    "SearchRegistry",
]
