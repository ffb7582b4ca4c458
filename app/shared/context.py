"""Request context management using contextvars.

Provides thread-safe, async-safe storage for the acting user of the
current request. The host sets it after authentication; search reads it
when building a default SearchContext.

Usage:
    set_current_user(user_id="user123")
    user_id = get_current_actor_id()
"""

from contextvars import ContextVar

_current_user_id: ContextVar[str | None] = ContextVar("current_user_id", default=None)


def set_current_user(user_id: str | None) -> None:
    """Set the current user for this request.

    Context is scoped to the current async task/thread.

    Args:
        user_id: Authenticated user ID or None.
    """
    _current_user_id.set(user_id)


def clear_current_user() -> None:
    """Clear the current user context."""
    _current_user_id.set(None)


def get_current_actor_id() -> str | None:
    """Return the current user ID, or None if not authenticated."""
    return _current_user_id.get()
