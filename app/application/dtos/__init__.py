"""Application DTOs (data transfer objects) for use cases."""

from app.application.dtos.search import ParsedQuery, SearchConfig, SearchContext

__all__ = ["ParsedQuery", "SearchConfig", "SearchContext"]
