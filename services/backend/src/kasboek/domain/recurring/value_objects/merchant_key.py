"""Merchant key composition helpers.

A merchant key is a plain string: either ``IBAN:<iban>`` or a cleaned
description fragment, optionally followed by ``|CAT:<category id>``.
"""

from __future__ import annotations

from uuid import UUID

MerchantKey = str

IBAN_PREFIX = "IBAN:"
CATEGORY_SEPARATOR = "|CAT:"


def iban_key(iban: str) -> MerchantKey:
    return f"{IBAN_PREFIX}{iban}"


def with_category(key: MerchantKey, category_id: UUID | str | None) -> MerchantKey:
    if category_id is None:
        return key
    return f"{key}{CATEGORY_SEPARATOR}{category_id}"


def is_iban_key(key: MerchantKey) -> bool:
    return key.startswith(IBAN_PREFIX)
