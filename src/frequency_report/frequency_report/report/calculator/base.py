from __future__ import annotations

from abc import ABC, abstractmethod


class AbsenceHoursCalculator(ABC):
    """Calculator interface (Strategy Pattern for absence hours)."""

    @abstractmethod
    def tardiness_hours(self, frequency_code: int) -> int:
        """Hours attributed to one late arrival, 0 when the code is not a tardiness."""
        raise NotImplementedError

    @abstractmethod
    def total_absence_hours(self, *, justified: int, unjustified: int, tardiness_hours: int) -> int:
        raise NotImplementedError
