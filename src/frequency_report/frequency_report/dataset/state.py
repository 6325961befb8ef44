from __future__ import annotations

from datetime import date
from typing import Iterable, Sequence

from ..common.datetime_utils import parse_br_date
from ..common.text import collation_key, normalize_name, normalize_tax_id
from ..core.constants import PROGRAM_CLASS_PREFIX
from .model import CompanyIdentity, CompanySummary, DateBounds, RawRecord


class DatasetState:
    """In-memory dataset plus the registries derived from it.

    Owns the parsed records, the company registry (one identity per CNPJ),
    the class index and the set of available dates. Report requests only read
    from it; ``replace`` and ``reset`` are the only mutators callers should use.
    """

    def __init__(self) -> None:
        self._records: list[RawRecord] = []
        self._companies: dict[str, CompanyIdentity] = {}
        self._classes_by_company: dict[str, set[str]] = {}
        self._dates: dict[str, None] = {}

    @property
    def records(self) -> Sequence[RawRecord]:
        return tuple(self._records)

    @property
    def is_loaded(self) -> bool:
        return bool(self._records)

    @property
    def company_count(self) -> int:
        return len(self._companies)

    @property
    def class_group_count(self) -> int:
        """Number of companies with at least one class (size of the class index)."""
        return len(self._classes_by_company)

    def reset(self) -> None:
        self._records = []
        self._companies = {}
        self._classes_by_company = {}
        self._dates = {}

    def ingest(self, records: Iterable[RawRecord]) -> None:
        """Rebuild every registry from ``records`` in a single pass."""
        self.reset()
        self._records = list(records)

        for r in self._records:
            class_code = normalize_name(r.class_code)
            tax_id = normalize_tax_id(r.company_tax_id)
            company = normalize_name(r.company_name)
            if not (class_code.upper().startswith(PROGRAM_CLASS_PREFIX) and tax_id and company):
                continue

            identity = self._companies.get(tax_id)
            if identity is None:
                identity = CompanyIdentity(tax_id=tax_id, name=company)
                self._companies[tax_id] = identity
            identity.add_alias(company)

            self._classes_by_company.setdefault(tax_id, set()).add(class_code)

            day = normalize_name(r.date)
            if day:
                self._dates.setdefault(day, None)

    def replace(self, records: Iterable[RawRecord]) -> None:
        """Swap in a new dataset only once its registries are fully built."""
        fresh = DatasetState()
        fresh.ingest(records)
        self._records = fresh._records
        self._companies = fresh._companies
        self._classes_by_company = fresh._classes_by_company
        self._dates = fresh._dates

    # ----- lookups -----

    def list_companies(self) -> list[CompanySummary]:
        items = [
            CompanySummary(tax_id=e.tax_id, name=e.name, aliases=tuple(e.aliases))
            for e in self._companies.values()
        ]
        items.sort(key=lambda x: collation_key(x.name))
        return items

    def search_companies(self, term: str | None) -> list[CompanySummary]:
        companies = self.list_companies()
        if not term or not term.strip():
            return companies

        needle = term.strip().casefold()
        digits = normalize_tax_id(term)

        def matches(company: CompanySummary) -> bool:
            if needle in company.name.casefold():
                return True
            if any(needle in alias.casefold() for alias in company.aliases):
                return True
            return bool(digits) and digits in company.tax_id

        return [x for x in companies if matches(x)]

    def get_company(self, tax_id: str | None) -> CompanySummary | None:
        identity = self._companies.get(normalize_tax_id(tax_id))
        if not identity:
            return None
        return CompanySummary(tax_id=identity.tax_id, name=identity.name, aliases=tuple(identity.aliases))

    def classes_for_company(self, tax_id: str | None) -> list[str]:
        return sorted(self._classes_by_company.get(normalize_tax_id(tax_id), ()))

    def all_class_codes(self) -> list[str]:
        codes: set[str] = set()
        for classes in self._classes_by_company.values():
            codes.update(classes)
        return sorted(codes)

    def available_dates(self) -> list[str]:
        def key(value: str):
            parsed = parse_br_date(value)
            # Unparseable strings go last, in the order they were first seen.
            return (parsed is None, parsed or date.min)

        return sorted(self._dates, key=key)

    def dataset_bounds(self) -> DateBounds:
        parsed = [d for d in (parse_br_date(v) for v in self._dates) if d]
        if not parsed:
            return DateBounds()
        return DateBounds(min=min(parsed), max=max(parsed))
