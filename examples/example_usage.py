"""Example: use the service layer directly (no Flask).

Loads a small in-memory extract and prints the consolidated report.
"""

from src.frequency_report.frequency_report.container import build_container
from src.frequency_report.frequency_report.report.model import ReportCriteria

SAMPLE = (
    "TURMA,CNPJ_EMPRESA,EMPRESA,DATA,RA,ALUNO,CURSO,FALTAS,FREQUENCIA,JUSTIFICADA,DESCRICAO\n"
    "APR01,11.222.333/0001-44,Acme Ltda,03/03/2025,1001,Ana Souza,Mecânica,4,,,Ativo\n"
    "APR01,11222333000144,Acme Ltda S.A.,04/03/2025,1001,Ana Souza,Mecânica,0,1,,Ativo\n"
)


def main():
    container = build_container()
    print(container.dataset_service.load_bytes(SAMPLE.encode("utf-8")))
    print(container.dataset_state.list_companies())

    report = container.report_service.build_report(ReportCriteria(tax_id="11222333000144"))
    for row in report.rows:
        print(row)


if __name__ == "__main__":
    main()
