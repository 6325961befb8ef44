from __future__ import annotations

from datetime import date

import pytest

from src.frequency_report.frequency_report.common.datetime_utils import month_year, parse_br_date
from src.frequency_report.frequency_report.common.text import (
    collation_key,
    first_field,
    normalize_name,
    normalize_status,
    normalize_tax_id,
    parse_int,
)


@pytest.mark.parametrize(
    "raw",
    ["11.222.333/0001-44", "11222333000144", " 11 222 333 0001 44 ", "11-222-333-0001-44"],
)
def test_normalize_tax_id_keeps_digits_only(raw):
    assert normalize_tax_id(raw) == "11222333000144"
    assert normalize_tax_id(normalize_tax_id(raw)) == "11222333000144"


def test_normalize_tax_id_none_is_empty():
    assert normalize_tax_id(None) == ""


def test_normalize_name_collapses_whitespace():
    assert normalize_name("  Acme   Ltda\tS.A. ") == "Acme Ltda S.A."
    assert normalize_name(None) == ""


def test_normalize_status_ignores_accents_and_case():
    assert normalize_status(" Em Formação ") == "EM FORMACAO"
    assert normalize_status("EM FORMACAO") == normalize_status("em formação")


def test_first_field_returns_first_present_column():
    row = {"FALT": "4", "FALTA": "2"}
    assert first_field(row, ["FALTAS", "FALTA", "FALT"]) == "2"
    assert first_field(row, ["X", "Y"]) is None


def test_first_field_accepts_empty_string_as_present():
    assert first_field({"FALTAS": "", "FALT": "4"}, ["FALTAS", "FALT"]) == ""


@pytest.mark.parametrize(
    "raw, expected",
    [("4", 4), (" 2 ", 2), ("4.0", 4), ("3 faltas", 3), ("abc", 0), ("", 0), (None, 0)],
)
def test_parse_int_takes_leading_integer(raw, expected):
    assert parse_int(raw) == expected


def test_parse_br_date():
    assert parse_br_date("07/03/2025") == date(2025, 3, 7)
    assert parse_br_date("31/02/2025") is None
    assert parse_br_date("2025-03-07") is None
    assert parse_br_date("") is None


def test_month_year():
    assert month_year("15/03/2025") == "03/2025"
    assert month_year("março") == ""


def test_collation_key_sorts_like_a_locale():
    names = ["Érica", "bruno", "Ana", "Álvaro"]
    assert sorted(names, key=collation_key) == ["Álvaro", "Ana", "bruno", "Érica"]
