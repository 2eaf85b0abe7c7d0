"""Merchant identity normalization.

Bank descriptions of the same counterparty differ from month to month:
dates, invoice numbers, card suffixes and terminal ids change while the
merchant stays the same. This module reduces a transaction to a stable
merchant key and a human readable display name.

Examples:
    counterparty "NL91 ABNA 0417 1643 00"       -> "IBAN:NL91ABNA0417164300"
    "ALBERT HEIJN 1234 12-05-2024 NR:99887"      -> "albert heijn"
    same, display name                           -> "Albert Heijn"
"""

from __future__ import annotations

import re
import string

from rapidfuzz.distance import Levenshtein

from kasboek.domain.recurring.value_objects import (
    LedgerTransaction,
    MerchantKey,
    iban_key,
    is_iban_key,
    with_category,
)
from kasboek.domain.shared.iban import is_valid_iban, normalize_iban

DEFAULT_SIMILARITY_THRESHOLD = 0.85
DISPLAY_NAME_MAX_LENGTH = 50
UNKNOWN_DISPLAY_NAME = "Unknown"

# English, Dutch and German month names and their common abbreviations
_MONTHS = sorted(
    {
        "january", "february", "march", "april", "may", "june", "july",
        "august", "september", "october", "november", "december",
        "januari", "februari", "maart", "mei", "juni", "juli", "augustus",
        "oktober",
        "januar", "februar", "maerz", "märz", "mai", "dezember",
        "jan", "feb", "mar", "mrt", "apr", "jun", "jul", "aug", "sep",
        "sept", "oct", "okt", "nov", "dec", "dez",
    },
    key=len,
    reverse=True,
)
_MONTH_ALTERNATION = "|".join(_MONTHS)

DATE_PATTERNS: tuple[re.Pattern[str], ...] = (
    # 12-05-2024, 12/05/24, 12.05.2024
    re.compile(r"\b\d{1,2}[-/.]\d{1,2}[-/.]\d{2,4}\b"),
    # 2024-05-12
    re.compile(r"\b\d{4}[-/.]\d{1,2}[-/.]\d{1,2}\b"),
    # 12 jan, 12. Mai 2024, 3 oktober 24
    re.compile(
        rf"\b\d{{1,2}}\.?\s*(?:{_MONTH_ALTERNATION})\b\.?(?:\s+\d{{2,4}}\b)?",
        re.IGNORECASE,
    ),
    # januari 2024, May 2024
    re.compile(rf"\b(?:{_MONTH_ALTERNATION})\b\.?\s+\d{{4}}\b", re.IGNORECASE),
)

REFERENCE_PATTERNS: tuple[re.Pattern[str], ...] = (
    # IBANs embedded in the description
    re.compile(r"\b[A-Z]{2}\d{2}[A-Z0-9]{4}\d{7}[A-Z0-9]{0,16}\b"),
    # Ref: ABC123, Kenmerk 4711
    re.compile(
        r"\b(?:ref|reference|kenmerk)[:.#]?\s*[A-Z0-9-]*\d[A-Z0-9-]*\b",
        re.IGNORECASE,
    ),
    # Nr: 12345
    re.compile(r"\bnr[:.#]?\s*[A-Z0-9-]*\d[A-Z0-9-]*\b", re.IGNORECASE),
    # Order #123, Factuur 456, Invoice INV-2024-01
    re.compile(
        r"\b(?:order|factuur|invoice|inv|rechnung)[:.#\s]*[A-Z0-9-]*\d[A-Z0-9-]*\b",
        re.IGNORECASE,
    ),
    # Reference codes like AB123456
    re.compile(r"\b[A-Z]{2,4}\d{6,12}\b"),
    # Masked card numbers ****1234, XXXX1234
    re.compile(r"(?:\*{2,}|\b[Xx]{4,})\s*\d{4}\b"),
    # Store numbers and long numeric sequences
    re.compile(r"\b\d{4,}\b"),
)

_WHITESPACE = re.compile(r"\s+")
_BOUNDARY_PUNCTUATION = ",.:;"


def _strip_noise(description: str) -> str:
    """Replace dates and references by spaces and lowercase the rest."""
    text = description
    for pattern in DATE_PATTERNS:
        text = pattern.sub(" ", text)
    for pattern in REFERENCE_PATTERNS:
        text = pattern.sub(" ", text)
    return text.lower()


def _trim(text: str) -> str:
    return text.strip().strip(_BOUNDARY_PUNCTUATION + string.whitespace)


def normalize_description(description: str | None) -> str:
    """Normalize a bank description into a merchant fragment."""
    if not description:
        return ""
    text = _WHITESPACE.sub(" ", _strip_noise(description))
    return _trim(text)


class MerchantNormalizer:
    """Maps transactions to merchant keys and display names.

    Stateless: every method depends only on its arguments.
    """

    def __init__(self, similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD):
        self._similarity_threshold = similarity_threshold

    def normalize(self, transaction: LedgerTransaction) -> MerchantKey:
        """Compute the merchant key of a transaction.

        Prefers the counterparty IBAN, which is the most reliable
        identifier, and falls back to the cleaned description. The
        category is appended so that transfers to the same account for
        different purposes (e.g. two savings goals) stay apart.

        Returns an empty key when the transaction carries neither.
        """
        if is_valid_iban(transaction.counterparty_iban):
            base = iban_key(normalize_iban(transaction.counterparty_iban) or "")
        else:
            base = normalize_description(transaction.description)

        if not base:
            return ""
        return with_category(base, transaction.category_id)

    def extract_display_name(self, transaction: LedgerTransaction) -> str:
        """Create a display-friendly merchant name from the description.

        Works on the normalized description, so removed dates and
        references do not cut the name short; only commas split it.
        """
        name = ""
        normalized = normalize_description(transaction.description)
        for fragment in normalized.split(","):
            name = _trim(fragment)
            if name:
                break

        name = string.capwords(name)

        if len(name) > DISPLAY_NAME_MAX_LENGTH:
            name = name[: DISPLAY_NAME_MAX_LENGTH - 3] + "..."

        return name or UNKNOWN_DISPLAY_NAME

    def is_same_merchant(self, key_a: MerchantKey, key_b: MerchantKey) -> bool:
        """Check whether two merchant keys likely denote the same merchant.

        IBAN keys only ever match exactly.
        """
        if key_a == key_b:
            return True

        if is_iban_key(key_a) or is_iban_key(key_b):
            return False

        similarity = Levenshtein.normalized_similarity(key_a, key_b)
        return similarity >= self._similarity_threshold
