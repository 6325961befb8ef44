from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Mapping, Optional

from ..core import constants as c


@dataclass(frozen=True)
class RawRecord:
    """Domain entity: one row of the attendance extract, as parsed."""

    class_code: str
    company_tax_id: str
    company_name: str
    date: str
    student_id: str
    student_name: str
    course: str
    description: str
    values: Mapping[str, str] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_row(cls, row: Mapping[str, str]) -> "RawRecord":
        values = MappingProxyType(dict(row))
        return cls(
            class_code=values.get(c.COL_CLASS) or "",
            company_tax_id=values.get(c.COL_TAX_ID) or "",
            company_name=values.get(c.COL_COMPANY) or "",
            date=values.get(c.COL_DATE) or "",
            student_id=values.get(c.COL_STUDENT_ID) or "",
            student_name=values.get(c.COL_STUDENT_NAME) or "",
            course=values.get(c.COL_COURSE) or "",
            description=values.get(c.COL_DESCRIPTION) or "",
            values=values,
        )


@dataclass
class CompanyIdentity:
    """One company per normalized CNPJ, with every spelling seen for it."""

    tax_id: str
    name: str
    aliases: dict[str, None] = field(default_factory=dict)

    def add_alias(self, alias: str) -> None:
        if not alias:
            return
        self.aliases.setdefault(alias, None)
        # Longest spelling wins; strict comparison keeps the first one on ties.
        if len(alias) > len(self.name):
            self.name = alias


@dataclass(frozen=True)
class CompanySummary:
    """Read-model for company pickers."""

    tax_id: str
    name: str
    aliases: tuple[str, ...]

    def to_dict(self) -> dict:
        return {"tax_id": self.tax_id, "name": self.name, "aliases": list(self.aliases)}


@dataclass(frozen=True)
class DateBounds:
    min: Optional[date] = None
    max: Optional[date] = None


@dataclass(frozen=True)
class LoadSummary:
    total_records: int
    companies: int
    classes: int

    def to_dict(self) -> dict:
        return {
            "total_records": self.total_records,
            "companies": self.companies,
            "classes": self.classes,
        }
