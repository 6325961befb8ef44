from __future__ import annotations

from typing import Iterable

from ..common.datetime_utils import parse_br_date
from ..common.text import normalize_status, normalize_tax_id
from ..dataset.model import RawRecord
from .model import ReportCriteria


def filter_records(records: Iterable[RawRecord], criteria: ReportCriteria) -> list[RawRecord]:
    """Apply company, class, period and status filters.

    A status list that normalizes to an empty set selects nothing at all,
    which is different from passing no status list.
    """
    status_keys = criteria.status_keys
    if status_keys is not None and not status_keys:
        return []

    # A digit-free tax id still filters: it only matches rows whose CNPJ has no digits.
    filter_by_company = bool(criteria.tax_id)
    tax_id = normalize_tax_id(criteria.tax_id)

    def keep(r: RawRecord) -> bool:
        if filter_by_company and normalize_tax_id(r.company_tax_id) != tax_id:
            return False

        if criteria.class_code and r.class_code != criteria.class_code:
            return False

        if criteria.has_date_range:
            day = parse_br_date(r.date)
            if day is None or day < criteria.start or day > criteria.end:
                return False

        if status_keys is not None and normalize_status(r.description) not in status_keys:
            return False

        return True

    return [r for r in records if keep(r)]
