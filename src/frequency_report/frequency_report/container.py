from __future__ import annotations

from dataclasses import dataclass

from .dataset.service import DatasetService
from .dataset.state import DatasetState
from .report.calculator.standard_calculator import StandardAbsenceCalculator
from .report.service import ReportService


@dataclass(frozen=True)
class Container:
    dataset_state: DatasetState

    dataset_service: DatasetService
    report_service: ReportService


def build_container() -> Container:
    state = DatasetState()
    return Container(
        dataset_state=state,
        dataset_service=DatasetService(state),
        report_service=ReportService(state, calculator=StandardAbsenceCalculator()),
    )
