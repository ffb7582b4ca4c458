"""Tenant context for the current request.

The host application sets the requesting tenant (agency) id here once it
has authenticated the caller. Search falls back to it when no explicit
SearchContext is passed.
"""

from contextvars import ContextVar

# Current tenant ID for the request (set by the host, read by search).
current_tenant_id: ContextVar[str | None] = ContextVar(
    "current_tenant_id", default=None
)


def set_tenant_id(tenant_id: str | None) -> None:
    """Set the current tenant ID for this context (e.g. request)."""
    current_tenant_id.set(tenant_id)


def get_tenant_id() -> str | None:
    """Return the current tenant ID if set."""
    return current_tenant_id.get()
