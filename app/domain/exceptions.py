"""Domain exceptions for the search core.

Defines domain-level exceptions raised while compiling a search. These
exceptions are independent of transport concerns; the host application
maps them to responses (e.g. QUERY_TOO_LONG to a bad request).
"""

from typing import Any


class RealtyException(Exception):
    """Base exception for all application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Callers map these to
    responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. max_length, entity).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class QueryTooLongException(RealtyException):
    """Raised when a normalized search query exceeds the configured maximum length.

    Client error: the caller should ask for a shorter query, never retry.
    """

    def __init__(self, max_length: int) -> None:
        """Initialize with the configured maximum.

        Args:
            max_length: Maximum allowed query length (characters).
        """
        self.max_length = max_length
        super().__init__(
            f"Search query exceeds maximum length of {max_length} characters",
            "QUERY_TOO_LONG",
            {"max_length": max_length},
        )


class UnknownSearchEntityException(RealtyException):
    """Raised when no search definition is registered for the requested entity."""

    def __init__(self, entity: object) -> None:
        """Initialize with the requested entity key.

        Args:
            entity: Entity key as passed by the caller (enum member or string).
        """
        key = getattr(entity, "value", entity)
        self.entity = key
        super().__init__(
            f"Search definition not found for {key!r}",
            "UNKNOWN_SEARCH_ENTITY",
            {"entity": str(key)},
        )


class UnknownSearchProviderException(RealtyException):
    """Raised when the configured search provider name has no implementation."""

    def __init__(self, name: str | None, supported: list[str] | None = None) -> None:
        """Initialize with the provider name and, optionally, the supported names.

        Args:
            name: Configured provider name.
            supported: Provider names that are registered.
        """
        self.name = name
        details: dict[str, Any] = {"provider": name}
        if supported is not None:
            details["supported"] = supported
        super().__init__(
            f"Unknown search provider: {name!r}",
            "UNKNOWN_SEARCH_PROVIDER",
            details,
        )


class SqlNotConfiguredException(RealtyException):
    """Raised when an operation requires a SQL database that is not configured."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
