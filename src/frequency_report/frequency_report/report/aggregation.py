from __future__ import annotations

from typing import Optional, Sequence

from ..common.text import collation_key, first_field, parse_int
from ..core.constants import (
    ABSENCE_COLUMNS,
    DAY_SEPARATOR,
    FREQUENCY_COLUMNS,
    FULL_DAY_ABSENCE_UNITS,
    JUSTIFICATION_COLUMNS,
    JUSTIFIED_ABSENCE_PHRASE,
)
from ..dataset.model import RawRecord
from .calculator.base import AbsenceHoursCalculator
from .calculator.standard_calculator import StandardAbsenceCalculator
from .model import ReportData, ReportRow, StudentAggregate


def _day_of(date_text: str) -> str:
    """'07/03/2025' -> '07'."""
    return (date_text or "").split("/")[0]


def _accumulate(student: StudentAggregate, r: RawRecord, calculator: AbsenceHoursCalculator) -> None:
    absences = parse_int(first_field(r.values, ABSENCE_COLUMNS))
    frequency = parse_int(first_field(r.values, FREQUENCY_COLUMNS))
    justification = str(first_field(r.values, JUSTIFICATION_COLUMNS) or "").strip().upper()
    day = _day_of(r.date)

    student.count_status(r.description)

    if 1 <= absences <= FULL_DAY_ABSENCE_UNITS:
        if justification == JUSTIFIED_ABSENCE_PHRASE:
            # Partial justified absences are neither counted nor listed.
            if absences == FULL_DAY_ABSENCE_UNITS:
                student.justified.append((day, 1))
        elif not justification and absences == FULL_DAY_ABSENCE_UNITS:
            student.unjustified.append((day, 1))

    hours = calculator.tardiness_hours(frequency)
    if hours:
        if day:
            student.tardy_days.append(day)
        student.tardiness_hours += hours


def _join_days(days: Sequence[str]) -> str:
    return DAY_SEPARATOR.join(d for d in days if d)


def _to_row(student: StudentAggregate, calculator: AbsenceHoursCalculator) -> ReportRow:
    justified_count = sum(weight for _, weight in student.justified)
    unjustified_count = sum(weight for _, weight in student.unjustified)
    return ReportRow(
        class_code=student.class_code,
        student_name=student.student_name,
        status=student.modal_status,
        company_name=student.company_name,
        course=student.course,
        justified_days=_join_days([d for d, _ in student.justified]),
        justified_count=justified_count,
        unjustified_days=_join_days([d for d, _ in student.unjustified]),
        unjustified_count=unjustified_count,
        tardy_days=_join_days(student.tardy_days),
        tardiness_hours=student.tardiness_hours,
        total_absence_hours=calculator.total_absence_hours(
            justified=justified_count,
            unjustified=unjustified_count,
            tardiness_hours=student.tardiness_hours,
        ),
    )


def aggregate_report(
    records: Sequence[RawRecord],
    *,
    calculator: Optional[AbsenceHoursCalculator] = None,
) -> ReportData:
    """Consolidate filtered records into one row per student (RA).

    Rows without a student id cannot be attributed and are skipped. Name,
    company, course and class of a student come from its first row.
    """
    calculator = calculator or StandardAbsenceCalculator()
    students: dict[str, StudentAggregate] = {}

    for r in records:
        if not r.student_id:
            continue
        student = students.get(r.student_id)
        if student is None:
            student = StudentAggregate(
                student_id=r.student_id,
                student_name=r.student_name,
                company_name=r.company_name,
                course=r.course,
                class_code=r.class_code,
            )
            students[r.student_id] = student
        _accumulate(student, r, calculator)

    rows = [_to_row(s, calculator) for s in students.values()]
    rows.sort(key=lambda x: collation_key(x.student_name))
    return ReportData(student_count=len(rows), record_count=len(records), rows=rows)
