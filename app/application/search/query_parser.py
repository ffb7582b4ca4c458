"""Search query normalization, length validation and PII masking."""

from __future__ import annotations

import re

from app.application.dtos.search import ParsedQuery
from app.domain.exceptions import QueryTooLongException

EMAIL_PLACEHOLDER = "[email]"
PHONE_PLACEHOLDER = "[phone]"

_EMAIL_RE = re.compile(r"[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}", re.IGNORECASE)
# Optional +, digits with interspersed spaces, dashes and parentheses. No word
# boundary: a number glued to letters ("Ivan77001234567") is still a phone.
_PHONE_RE = re.compile(r"\+?\(?\d[\d\s\-()]*\d")
_PHONE_MIN_DIGITS = 8


def _mask_phone(match: re.Match[str]) -> str:
    text = match.group(0)
    if sum(ch.isdigit() for ch in text) < _PHONE_MIN_DIGITS:
        return text
    return PHONE_PLACEHOLDER


def mask_pii(query: str) -> str:
    """Replace email- and phone-shaped substrings with placeholders.

    Emails are masked first so digits inside an address are not taken for
    a phone. The result is for logs only and must never reach a predicate.
    """
    masked = _EMAIL_RE.sub(EMAIL_PLACEHOLDER, query)
    return _PHONE_RE.sub(_mask_phone, masked)


def normalize_query(raw: str) -> str:
    """Trim and collapse whitespace runs to single spaces."""
    return " ".join(raw.split())


class QueryParser:
    """Turns raw user input into a ParsedQuery (or None for "no search")."""

    def __init__(self, max_length: int | None = None) -> None:
        self.max_length = max_length

    def parse(self, raw: str | None) -> ParsedQuery | None:
        """Normalize raw and build its masked copy.

        Args:
            raw: Query text as received from the caller.

        Returns:
            ParsedQuery, or None when raw is None or blank after normalization.

        Raises:
            QueryTooLongException: If the normalized query exceeds max_length.
        """
        if raw is None:
            return None
        normalized = normalize_query(str(raw))
        if not normalized:
            return None
        if self.max_length and len(normalized) > self.max_length:
            raise QueryTooLongException(self.max_length)
        return ParsedQuery(normalized=normalized, masked=mask_pii(normalized))
