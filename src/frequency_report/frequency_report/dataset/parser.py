from __future__ import annotations

import csv
import io

from ..core.exceptions import DatasetLoadError
from .model import RawRecord


def _is_blank(row: list[str]) -> bool:
    return not row or all(not cell.strip() for cell in row)


def parse_records(text: str) -> list[RawRecord]:
    """Parse header-delimited CSV text into records.

    The first row is the header. Blank lines are skipped. Any malformed row
    aborts the whole parse with the first diagnostic, there is no partial result.
    """
    reader = csv.reader(io.StringIO(text, newline=""), strict=True)
    records: list[RawRecord] = []
    headers: list[str] | None = None

    try:
        for row in reader:
            if _is_blank(row):
                continue
            if headers is None:
                headers = [h.strip() for h in row]
                continue
            if len(row) != len(headers):
                kind = "Too few fields" if len(row) < len(headers) else "Too many fields"
                raise DatasetLoadError(
                    f"{kind}: expected {len(headers)} fields but parsed {len(row)} (linha {reader.line_num})",
                    line=reader.line_num,
                )
            records.append(RawRecord.from_row(dict(zip(headers, row))))
    except csv.Error as e:
        raise DatasetLoadError(f"{e} (linha {reader.line_num})", line=reader.line_num) from e

    return records
