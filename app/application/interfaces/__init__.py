"""Application interfaces (ports). Infrastructure implements these (DIP)."""

from app.application.interfaces.search import ISearchCollection, ISearchProvider

__all__ = ["ISearchCollection", "ISearchProvider"]
