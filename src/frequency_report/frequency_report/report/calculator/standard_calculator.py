from __future__ import annotations

from ...core.constants import HOURS_PER_ABSENCE_DAY, TARDINESS_HOURS_BY_CODE
from .base import AbsenceHoursCalculator


class StandardAbsenceCalculator(AbsenceHoursCalculator):
    """Standard rule: 4h per absent day, tardiness codes 1/2/3 -> 3/2/1 hours."""

    def tardiness_hours(self, frequency_code: int) -> int:
        return TARDINESS_HOURS_BY_CODE.get(frequency_code, 0)

    def total_absence_hours(self, *, justified: int, unjustified: int, tardiness_hours: int) -> int:
        return justified * HOURS_PER_ABSENCE_DAY + unjustified * HOURS_PER_ABSENCE_DAY + int(tardiness_hours or 0)
