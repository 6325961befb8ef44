"""Tabular export of a report for spreadsheet tools.

Layout: three title lines, a blank line, the header, then one row per student.
"""

from __future__ import annotations

import csv
import io
import re
from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import format_br_date, month_year
from ..common.text import strip_accents
from ..core.constants import DEFAULT_INSTITUTION, DEFAULT_PROGRAM, REPORT_TITLE
from ..core.enums import ReportColumn
from .model import ReportData


def report_title_lines(
    *,
    period_start: Optional[date] = None,
    available_dates: Sequence[str] = (),
    institution: str = DEFAULT_INSTITUTION,
    program: str = DEFAULT_PROGRAM,
) -> list[str]:
    """Title lines; month/year comes from the period start, else the first dataset date."""
    if period_start:
        period = month_year(format_br_date(period_start))
    elif available_dates:
        period = month_year(available_dates[0])
    else:
        period = ""
    return [institution, program, f"{REPORT_TITLE} - {period}"]


def export_rows(report: ReportData) -> list[dict[str, object]]:
    return [r.to_export() for r in report.rows]


def write_report_csv(report: ReportData, *, title_lines: Sequence[str] = ()) -> bytes:
    """Write report rows to CSV bytes (UTF-8 with BOM so Excel keeps the accents)."""
    out = io.StringIO()
    writer = csv.writer(out)
    for line in title_lines:
        writer.writerow([line])
    if title_lines:
        writer.writerow([])

    fieldnames = [c.value for c in ReportColumn]
    dict_writer = csv.DictWriter(out, fieldnames=fieldnames)
    dict_writer.writeheader()
    for row in export_rows(report):
        dict_writer.writerow(row)

    return out.getvalue().encode("utf-8-sig")


def report_filename(company_name: Optional[str], *, now: Optional[datetime] = None) -> str:
    now = now or datetime.now()
    slug = re.sub(r"[^A-Za-z0-9]+", "_", strip_accents(company_name or "TODAS_EMPRESAS")).strip("_")
    return f"relatorio_frequencia_{slug or 'TODAS_EMPRESAS'}_{int(now.timestamp() * 1000)}.csv"
