from __future__ import annotations

from enum import Enum


class ReportColumn(str, Enum):
    """Cabeçalhos da planilha de frequência, na ordem de exportação."""

    CLASS_CODE = "TURMA"
    STUDENT = "ALUNO"
    STATUS = "STATUS"
    COMPANY = "EMPRESA"
    COURSE = "CURSO"
    JUSTIFIED_DAYS = "FALTAS JUSTIFICADAS (DIAS)"
    JUSTIFIED_COUNT = "Nº FALTAS JUSTIFICADAS"
    UNJUSTIFIED_DAYS = "FALTAS NÃO JUSTIFICADAS (DIAS)"
    UNJUSTIFIED_COUNT = "Nº FALTAS NÃO JUSTIFICADAS"
    TARDY_DAYS = "ATRASOS (DIAS)"
    TARDINESS_HOURS = "Nº HORAS DE ATRASO"
    TOTAL_ABSENCE_HOURS = "TOTAL HORAS DE AUSÊNCIA NO CURSO"
