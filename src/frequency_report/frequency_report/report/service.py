from __future__ import annotations

import logging
from typing import Optional

from ..core.exceptions import DatasetNotLoadedError
from ..dataset.state import DatasetState
from .aggregation import aggregate_report
from .calculator.base import AbsenceHoursCalculator
from .calculator.standard_calculator import StandardAbsenceCalculator
from .filters import filter_records
from .model import ReportCriteria, ReportData

logger = logging.getLogger(__name__)


class ReportService:
    def __init__(
        self,
        state: DatasetState,
        *,
        calculator: Optional[AbsenceHoursCalculator] = None,
    ):
        self._state = state
        self._calculator = calculator or StandardAbsenceCalculator()

    def build_report(self, criteria: ReportCriteria) -> ReportData:
        """Filter the loaded dataset and consolidate it per student.

        An empty result is a valid outcome: check ``criteria.selects_nothing``
        to tell "no status selected" apart from "nothing matched".
        """
        if not self._state.is_loaded:
            raise DatasetNotLoadedError("Nenhum arquivo CSV carregado")

        records = filter_records(self._state.records, criteria)
        report = aggregate_report(records, calculator=self._calculator)
        logger.info(
            "Report for company=%s class=%s period=%s..%s: %d students from %d records",
            criteria.tax_id or "*",
            criteria.class_code or "*",
            criteria.start or "-",
            criteria.end or "-",
            report.student_count,
            report.record_count,
        )
        return report
