"""IBAN normalization utilities."""

from __future__ import annotations

import re

IBAN_MIN_LENGTH = 15
IBAN_MAX_LENGTH = 34

_IBAN_SHAPE = re.compile(r"^[A-Z]{2}\d{2}[A-Z0-9]+$")


def normalize_iban(value: str | None) -> str | None:
    """Normalize an IBAN for stable comparisons/storage.

    - Removes all whitespace
    - Strips surrounding whitespace
    - Uppercases

    Returns None if value is None or empty after normalization.
    """
    if value is None:
        return None
    normalized = re.sub(r"\s+", "", value).upper()
    return normalized or None


def is_valid_iban(value: str | None) -> bool:
    """Check the shape of an IBAN (no checksum validation).

    An IBAN starts with a 2 letter country code followed by 2 check digits
    and an alphanumeric account part. Total length varies by country but is
    always between 15 and 34 characters.
    """
    normalized = normalize_iban(value)
    if normalized is None:
        return False
    if not IBAN_MIN_LENGTH <= len(normalized) <= IBAN_MAX_LENGTH:
        return False
    return _IBAN_SHAPE.match(normalized) is not None
