from __future__ import annotations

from datetime import date

from src.frequency_report.frequency_report.dataset.state import DatasetState


def test_company_aliases_merge_under_one_tax_id(make_record):
    state = DatasetState()
    state.ingest(
        [
            make_record(TURMA="APR01", CNPJ_EMPRESA="11.222.333/0001-44", EMPRESA="Acme Ltda"),
            make_record(TURMA="APR01", CNPJ_EMPRESA="11222333000144", EMPRESA="Acme Ltda S.A."),
        ]
    )

    companies = state.list_companies()
    assert len(companies) == 1
    assert companies[0].tax_id == "11222333000144"
    assert companies[0].name == "Acme Ltda S.A."
    assert set(companies[0].aliases) == {"Acme Ltda", "Acme Ltda S.A."}


def test_equal_length_alias_keeps_first_name(make_record):
    state = DatasetState()
    state.ingest([make_record(EMPRESA="ACME LTDA"), make_record(EMPRESA="Acme Ltda")])

    assert state.list_companies()[0].name == "ACME LTDA"


def test_only_program_classes_with_company_qualify(make_record):
    state = DatasetState()
    state.ingest(
        [
            make_record(TURMA="apr02", CNPJ_EMPRESA="1", EMPRESA="Lower Case"),
            make_record(TURMA="TEC01", CNPJ_EMPRESA="2", EMPRESA="Outro Programa"),
            make_record(TURMA="APR03", CNPJ_EMPRESA="", EMPRESA="Sem CNPJ"),
            make_record(TURMA="APR04", CNPJ_EMPRESA="3", EMPRESA="   "),
        ]
    )

    assert [c.tax_id for c in state.list_companies()] == ["1"]
    assert state.classes_for_company("1") == ["apr02"]


def test_classes_for_company_normalizes_lookup(make_record):
    state = DatasetState()
    state.ingest(
        [
            make_record(TURMA="APR02"),
            make_record(TURMA="APR01"),
            make_record(TURMA="APR01"),
        ]
    )

    assert state.classes_for_company("11.222.333/0001-44") == ["APR01", "APR02"]
    assert state.classes_for_company("99999999000199") == []


def test_all_class_codes_is_union(make_record):
    state = DatasetState()
    state.ingest([make_record(TURMA="APR02"), make_record(TURMA="APR01", CNPJ_EMPRESA="5", EMPRESA="Beta")])

    assert state.all_class_codes() == ["APR01", "APR02"]


def test_search_companies_by_alias_name_and_digits(make_record):
    state = DatasetState()
    state.ingest(
        [
            make_record(EMPRESA="ACME"),
            make_record(EMPRESA="Acme Indústria e Comércio"),
            make_record(CNPJ_EMPRESA="44.555.666/0001-77", EMPRESA="Beta Serviços"),
        ]
    )

    found = state.search_companies("acme")
    assert [c.name for c in found] == ["Acme Indústria e Comércio"]

    by_old_spelling = state.search_companies("ACME")
    assert len(by_old_spelling) == 1

    by_digits = state.search_companies("555.666")
    assert [c.tax_id for c in by_digits] == ["44555666000177"]

    assert len(state.search_companies("   ")) == 2
    assert state.search_companies("inexistente") == []


def test_search_without_digits_does_not_match_every_tax_id(make_record):
    state = DatasetState()
    state.ingest([make_record(EMPRESA="Acme")])

    assert state.search_companies("xyz") == []


def test_list_companies_sorted_ignoring_accents(make_record):
    state = DatasetState()
    state.ingest(
        [
            make_record(CNPJ_EMPRESA="1", EMPRESA="Ótica Central"),
            make_record(CNPJ_EMPRESA="2", EMPRESA="beta"),
            make_record(CNPJ_EMPRESA="3", EMPRESA="Alfa"),
        ]
    )

    assert [c.name for c in state.list_companies()] == ["Alfa", "beta", "Ótica Central"]


def test_available_dates_are_chronological(make_record):
    state = DatasetState()
    state.ingest(
        [
            make_record(DATA="10/03/2025"),
            make_record(DATA="02/04/2025"),
            make_record(DATA="28/02/2025"),
            make_record(DATA="10/03/2025"),
        ]
    )

    assert state.available_dates() == ["28/02/2025", "10/03/2025", "02/04/2025"]
    bounds = state.dataset_bounds()
    assert bounds.min == date(2025, 2, 28)
    assert bounds.max == date(2025, 4, 2)


def test_dataset_bounds_empty():
    bounds = DatasetState().dataset_bounds()
    assert bounds.min is None and bounds.max is None


def test_replace_drops_previous_aliases(make_record):
    state = DatasetState()
    state.replace([make_record(EMPRESA="Nome Antigo Bem Comprido")])
    state.replace([make_record(EMPRESA="Acme")])

    companies = state.list_companies()
    assert companies[0].name == "Acme"
    assert companies[0].aliases == ("Acme",)


def test_ingest_is_idempotent(make_record):
    records = [make_record(EMPRESA="Acme"), make_record(EMPRESA="Acme S.A.", TURMA="APR02")]
    state = DatasetState()
    state.ingest(records)
    first = (state.list_companies(), state.all_class_codes(), state.available_dates())

    state.reset()
    state.ingest(records)

    assert (state.list_companies(), state.all_class_codes(), state.available_dates()) == first


def test_reset_clears_everything(make_record):
    state = DatasetState()
    state.ingest([make_record()])
    state.reset()

    assert not state.is_loaded
    assert state.list_companies() == []
    assert state.available_dates() == []


def test_search_companies_matches_non_chosen_alias(make_record):
    state = DatasetState()
    state.ingest([make_record(EMPRESA="ACME LTDA"), make_record(EMPRESA="Acme Industria e Comercio SA")])

    found = state.search_companies("ltda")

    assert [c.name for c in found] == ["Acme Industria e Comercio SA"]
    assert "ltda" not in found[0].name.casefold()
