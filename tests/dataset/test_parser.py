from __future__ import annotations

import pytest

from src.frequency_report.frequency_report.core.exceptions import DatasetLoadError
from src.frequency_report.frequency_report.dataset.parser import parse_records


def test_parse_records_maps_columns(sample_csv):
    records = parse_records(sample_csv)

    assert len(records) == 5
    first = records[0]
    assert first.class_code == "APR01"
    assert first.company_tax_id == "11.222.333/0001-44"
    assert first.student_id == "1001"
    assert first.values["FALTAS"] == "4"


def test_parse_records_skips_blank_lines_and_trims_headers():
    text = " TURMA , RA \n\nAPR01,1\n\n\nAPR02,2\n"
    records = parse_records(text)

    assert [r.class_code for r in records] == ["APR01", "APR02"]
    assert records[1].student_id == "2"


def test_parse_records_header_only_is_empty():
    assert parse_records("TURMA,RA\n") == []


def test_row_with_wrong_field_count_aborts_load():
    text = "TURMA,RA,ALUNO\nAPR01,1,Ana\nAPR01,2\n"

    with pytest.raises(DatasetLoadError) as exc:
        parse_records(text)

    assert "Too few fields" in str(exc.value)
    assert exc.value.line == 3


def test_malformed_quotes_abort_load():
    with pytest.raises(DatasetLoadError):
        parse_records('TURMA,RA\n"APR01"x,1\n')
