from __future__ import annotations

import re
import unicodedata
from typing import Any, Mapping, Optional, Sequence

_NON_DIGITS = re.compile(r"\D")
_WHITESPACE = re.compile(r"\s+")
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def normalize_tax_id(value: Any) -> str:
    """Keep only the digits of a CNPJ (14 digits when valid)."""
    if value is None:
        return ""
    return _NON_DIGITS.sub("", str(value))


def normalize_name(value: Any) -> str:
    """Collapse whitespace runs and trim."""
    if not value:
        return ""
    return _WHITESPACE.sub(" ", str(value)).strip()


def strip_accents(value: str) -> str:
    decomposed = unicodedata.normalize("NFD", value)
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def normalize_status(value: Any) -> str:
    """Accent- and case-insensitive form of a status label."""
    if value is None:
        return ""
    return strip_accents(str(value)).upper().strip()


def collation_key(value: Optional[str]) -> tuple[str, str]:
    """Sort key approximating a locale-aware comparison.

    Primary level ignores accents and case ("Ágata" sorts with "agata"), the
    original text breaks ties so the order stays deterministic.
    """
    text = value or ""
    return strip_accents(text).casefold(), text


def first_field(row: Mapping[str, Any], candidates: Sequence[str]) -> Optional[Any]:
    """Return the value of the first candidate column present in ``row``.

    A column counts as present when the key exists and its value is not None,
    even if the value is an empty string.
    """
    for key in candidates:
        value = row.get(key)
        if value is not None:
            return value
    return None


def parse_int(value: Any) -> int:
    """Leading integer of ``value``; anything unparseable counts as 0."""
    if value is None:
        return 0
    match = _LEADING_INT.match(str(value))
    if not match:
        return 0
    return int(match.group(1))
