from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import parse_br_date
from ..common.text import normalize_status
from ..core.constants import ALL_CLASSES, ALL_COMPANIES
from ..core.enums import ReportColumn
from ..core.exceptions import ValidationError


def _optional_text(value: Any, *sentinels: str) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    if not text or text in sentinels:
        return None
    return text


def _optional_date(value: Any, field_name: str) -> Optional[date]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if isinstance(value, date):
        return value
    parsed = parse_br_date(str(value))
    if parsed is None:
        raise ValidationError(f"{field_name} inválida, use DD/MM/AAAA")
    return parsed


@dataclass(frozen=True)
class ReportCriteria:
    """Filters of one report request. ``None`` means "do not filter"."""

    tax_id: Optional[str] = None
    class_code: Optional[str] = None
    start: Optional[date] = None
    end: Optional[date] = None
    statuses: Optional[tuple[str, ...]] = None

    @property
    def has_date_range(self) -> bool:
        return self.start is not None and self.end is not None

    @property
    def status_keys(self) -> Optional[frozenset[str]]:
        if self.statuses is None:
            return None
        return frozenset(normalize_status(s) for s in self.statuses)

    @property
    def selects_nothing(self) -> bool:
        """A status list was given but nothing in it was selected."""
        keys = self.status_keys
        return keys is not None and not keys

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ReportCriteria":
        """Build criteria from request input (JSON body, form or CLI args)."""
        start = _optional_date(data.get("start"), "Data inicial")
        end = _optional_date(data.get("end"), "Data final")
        if (start is None) != (end is None):
            raise ValidationError("Informe a data inicial e a data final do período")
        if start and end and start > end:
            raise ValidationError("A data inicial deve ser anterior ou igual à data final")

        statuses = data.get("statuses")
        if statuses is not None:
            if isinstance(statuses, str) or not isinstance(statuses, Sequence):
                raise ValidationError("statuses deve ser uma lista")
            statuses = tuple(str(s) for s in statuses if s is not None)

        return cls(
            tax_id=_optional_text(data.get("tax_id"), ALL_COMPANIES),
            class_code=_optional_text(data.get("class_code"), ALL_CLASSES),
            start=start,
            end=end,
            statuses=statuses,
        )


@dataclass
class StudentAggregate:
    """Per-student accumulator, lives for a single report generation."""

    student_id: str
    student_name: str
    company_name: str
    course: str
    class_code: str
    justified: list[tuple[str, int]] = field(default_factory=list)
    unjustified: list[tuple[str, int]] = field(default_factory=list)
    tardy_days: list[str] = field(default_factory=list)
    tardiness_hours: int = 0
    # normalized status -> [first literal spelling, count]
    status_counts: dict[str, list] = field(default_factory=dict)

    def count_status(self, raw: str) -> None:
        key = normalize_status(raw)
        if not key:
            return
        entry = self.status_counts.get(key)
        if entry is None:
            self.status_counts[key] = [raw.strip(), 1]
        else:
            entry[1] += 1

    @property
    def modal_status(self) -> str:
        best, best_count = "", 0
        # dict keeps insertion order: strict ">" keeps the first-seen label on ties.
        for label, count in self.status_counts.values():
            if count > best_count:
                best, best_count = label, count
        return best


@dataclass(frozen=True)
class ReportRow:
    """One line of the frequency report, one per student."""

    class_code: str
    student_name: str
    status: str
    company_name: str
    course: str
    justified_days: str
    justified_count: int
    unjustified_days: str
    unjustified_count: int
    tardy_days: str
    tardiness_hours: int
    total_absence_hours: int

    def to_dict(self) -> dict:
        return {
            "class_code": self.class_code,
            "student_name": self.student_name,
            "status": self.status,
            "company_name": self.company_name,
            "course": self.course,
            "justified_days": self.justified_days,
            "justified_count": self.justified_count,
            "unjustified_days": self.unjustified_days,
            "unjustified_count": self.unjustified_count,
            "tardy_days": self.tardy_days,
            "tardiness_hours": self.tardiness_hours,
            "total_absence_hours": self.total_absence_hours,
        }

    def to_export(self) -> dict[str, object]:
        """Row keyed by the spreadsheet headers."""
        return {
            ReportColumn.CLASS_CODE.value: self.class_code,
            ReportColumn.STUDENT.value: self.student_name,
            ReportColumn.STATUS.value: self.status,
            ReportColumn.COMPANY.value: self.company_name,
            ReportColumn.COURSE.value: self.course,
            ReportColumn.JUSTIFIED_DAYS.value: self.justified_days,
            ReportColumn.JUSTIFIED_COUNT.value: self.justified_count,
            ReportColumn.UNJUSTIFIED_DAYS.value: self.unjustified_days,
            ReportColumn.UNJUSTIFIED_COUNT.value: self.unjustified_count,
            ReportColumn.TARDY_DAYS.value: self.tardy_days,
            ReportColumn.TARDINESS_HOURS.value: self.tardiness_hours,
            ReportColumn.TOTAL_ABSENCE_HOURS.value: self.total_absence_hours,
        }


@dataclass(frozen=True)
class ReportData:
    student_count: int
    record_count: int
    rows: list[ReportRow]

    @property
    def is_empty(self) -> bool:
        return self.record_count == 0

    def to_dict(self) -> dict:
        return {
            "student_count": self.student_count,
            "record_count": self.record_count,
            "rows": [r.to_dict() for r in self.rows],
        }
