from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.constants import DATE_FORMAT


def parse_br_date(value: Optional[str]) -> Optional[date]:
    """Parse a DD/MM/YYYY string into date, None when it is not one."""
    if not value:
        return None
    parts = str(value).strip().split("/")
    if len(parts) != 3:
        return None
    try:
        day, month, year = (int(p) for p in parts)
        return date(year, month, day)
    except ValueError:
        return None


def format_br_date(value: Optional[date]) -> str:
    if not value:
        return ""
    return value.strftime(DATE_FORMAT)


def month_year(value: Optional[str]) -> str:
    """'15/03/2025' -> '03/2025'; empty when the text is not a DD/MM/YYYY date."""
    if not value:
        return ""
    parts = str(value).strip().split("/")
    if len(parts) != 3:
        return ""
    return f"{parts[1]}/{parts[2]}"
