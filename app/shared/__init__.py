"""Shared utilities: actor context, telemetry, and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from app.shared.context import (
    clear_current_user,
    get_current_actor_id,
    set_current_user,
)
from app.shared.utils import is_phone_query, normalize_phone

__all__ = [
    "set_current_user",
    "clear_current_user",
    "get_current_actor_id",
    "is_phone_query",
    "normalize_phone",
]
