"""Domain layer: enums and exceptions.

No dependencies on infrastructure. Used by application and
infrastructure layers.
"""

from app.domain.enums import SearchEntity
from app.domain.exceptions import (
    QueryTooLongException,
    RealtyException,
    SqlNotConfiguredException,
    UnknownSearchEntityException,
    UnknownSearchProviderException,
)

__all__ = [
    # Enums
    "SearchEntity",
    # Exceptions
    "QueryTooLongException",
    "RealtyException",
    "SqlNotConfiguredException",
    "UnknownSearchEntityException",
    "UnknownSearchProviderException",
]
