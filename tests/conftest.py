from __future__ import annotations

import pytest

from src.frequency_report.frequency_report.dataset.model import RawRecord

HEADER = "TURMA,CNPJ_EMPRESA,EMPRESA,DATA,RA,ALUNO,CURSO,FALTAS,FREQUENCIA,JUSTIFICADA,DESCRICAO"


@pytest.fixture
def make_record():
    """Build a RawRecord from keyword arguments named after the CSV columns."""

    def _make(**overrides) -> RawRecord:
        row = {
            "TURMA": "APR01",
            "CNPJ_EMPRESA": "11.222.333/0001-44",
            "EMPRESA": "Acme Ltda",
            "DATA": "03/03/2025",
            "RA": "1001",
            "ALUNO": "Ana Souza",
            "CURSO": "Mecânica",
            "FALTAS": "0",
            "FREQUENCIA": "0",
            "JUSTIFICADA": "",
            "DESCRICAO": "Ativo",
        }
        row.update(overrides)
        return RawRecord.from_row({k: v for k, v in row.items() if v is not None})

    return _make


@pytest.fixture
def sample_csv() -> str:
    return "\n".join(
        [
            HEADER,
            "APR01,11.222.333/0001-44,Acme Ltda,03/03/2025,1001,Ana Souza,Mecânica,4,,,Ativo",
            "APR01,11222333000144,Acme Ltda S.A.,04/03/2025,1001,Ana Souza,Mecânica,4,,FALTA JUSTIFICADA,Ativo",
            "APR01,11222333000144,Acme Ltda S.A.,05/03/2025,1002,Bruno Lima,Mecânica,0,2,,Ativo",
            "APR02,44.555.666/0001-77,Beta Indústria,10/03/2025,2001,Carla Dias,Elétrica,0,1,,Em Formação",
            "TEC01,77.888.999/0001-00,Gama Serviços,11/03/2025,3001,Davi Reis,Logística,4,,,Ativo",
            "",
        ]
    )
