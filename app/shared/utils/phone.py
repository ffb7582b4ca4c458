"""Phone number normalization for matching against stored normalized phones.

Stored phones (person.normalized_phone) are digits only with the country
code, e.g. 77001234567. Queries arrive in any human format:
"+7 (700) 123-45-67", "8 700 123 45 67", "700-123".
"""

import re

_NON_DIGITS_RE = re.compile(r"\D+")

# Domestic trunk prefix used instead of the country code (RU/KZ numbering plan).
_TRUNK_PREFIX = "8"
_COUNTRY_CODE = "7"
_FULL_NUMBER_LENGTH = 11


def normalize_phone(value: str | None) -> str | None:
    """Reduce a phone-shaped string to the stored digits-only form.

    A full-length number written with the domestic trunk prefix
    (8XXXXXXXXXX) is rewritten to the country code form (7XXXXXXXXXX).
    Partial numbers keep their digits as typed so they still match as a
    substring.

    Args:
        value: Raw phone or query text.

    Returns:
        Digits-only string, or None when value contains no digits.
    """
    if not value:
        return None
    digits = _NON_DIGITS_RE.sub("", value)
    if not digits:
        return None
    if len(digits) == _FULL_NUMBER_LENGTH and digits.startswith(_TRUNK_PREFIX):
        digits = _COUNTRY_CODE + digits[1:]
    return digits


# Digits plus the punctuation people type inside phone numbers.
_PHONE_SHAPED_RE = re.compile(r"\+?[\d\s\-()]*\d[\d\s\-()]*")


def is_phone_query(value: str | None) -> bool:
    """True when value reads as (part of) a phone number and nothing else.

    "Lenina 7" is not phone-shaped, so its 7 never matches phone columns;
    "700-123" and "+7 (700) 123-45-67" are.
    """
    if not value:
        return False
    return _PHONE_SHAPED_RE.fullmatch(value.strip()) is not None
