"""Build a frequency report from a CSV extract without the web app.

Example:
    python scripts/build_report.py --input frequencia.csv --company 11222333000144 \
        --start 01/03/2025 --end 31/03/2025 --output relatorio.csv
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.frequency_report.frequency_report.container import build_container
from src.frequency_report.frequency_report.core.exceptions import DomainError
from src.frequency_report.frequency_report.report.export import (
    report_filename,
    report_title_lines,
    write_report_csv,
)
from src.frequency_report.frequency_report.report.model import ReportCriteria


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Relatório de frequência dos aprendizes")
    parser.add_argument("--input", required=True, help="CSV extract")
    parser.add_argument("--company", dest="tax_id", default=None, help="CNPJ (any punctuation)")
    parser.add_argument("--class", dest="class_code", default=None, help="class code, e.g. APR01")
    parser.add_argument("--start", default=None, help="DD/MM/YYYY")
    parser.add_argument("--end", default=None, help="DD/MM/YYYY")
    parser.add_argument("--status", dest="statuses", action="append", default=None, help="repeat for each status")
    parser.add_argument("--output", default="", help="output CSV (default: generated name)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    settings = importlib.import_module(get_settings_module())
    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))

    container = build_container()
    try:
        container.dataset_service.load_path(args.input)
        criteria = ReportCriteria.from_mapping(vars(args))
        report = container.report_service.build_report(criteria)
    except DomainError as e:
        raise SystemExit(f"Erro: {e}")

    if report.is_empty:
        raise SystemExit("Nenhum registro encontrado com os filtros selecionados.")

    company = container.dataset_state.get_company(criteria.tax_id) if criteria.tax_id else None
    title_lines = report_title_lines(
        period_start=criteria.start,
        available_dates=container.dataset_state.available_dates(),
        institution=settings.REPORT_INSTITUTION,
        program=settings.REPORT_PROGRAM,
    )
    out_file = Path(args.output or report_filename(company.name if company else None))
    out_file.write_bytes(write_report_csv(report, title_lines=title_lines))
    print(f"OK: {out_file} (alunos={report.student_count}, registros={report.record_count})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
