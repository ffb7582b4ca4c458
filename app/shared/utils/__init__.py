"""Shared utilities: phone normalization."""

from app.shared.utils.phone import is_phone_query, normalize_phone

__all__ = ["is_phone_query", "normalize_phone"]
