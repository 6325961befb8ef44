"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Classes of the apprenticeship program ("Jovem Aprendiz") start with this code.
PROGRAM_CLASS_PREFIX = "APR"

JUSTIFIED_ABSENCE_PHRASE = "FALTA JUSTIFICADA"

# An absence only counts as a reportable day when it covers the full 4 class units.
FULL_DAY_ABSENCE_UNITS = 4
HOURS_PER_ABSENCE_DAY = 4

# Frequency code -> tardiness hours (lower code means a later arrival).
TARDINESS_HOURS_BY_CODE = {1: 3, 2: 2, 3: 1}

DATE_FORMAT = "%d/%m/%Y"
DAY_SEPARATOR = ", "

# Source CSV columns
COL_CLASS = "TURMA"
COL_TAX_ID = "CNPJ_EMPRESA"
COL_COMPANY = "EMPRESA"
COL_DATE = "DATA"
COL_STUDENT_ID = "RA"
COL_STUDENT_NAME = "ALUNO"
COL_COURSE = "CURSO"
COL_DESCRIPTION = "DESCRICAO"

# Some exports truncate these headers; the first alias present in the row wins.
ABSENCE_COLUMNS = ("FALTAS", "FALTA", "FALT", "FALT.")
FREQUENCY_COLUMNS = ("FREQUENCIA", "FREQUENC", "FREQ")
JUSTIFICATION_COLUMNS = ("JUSTIFICADA", "JUSTIF", "JUSTIFIC")

# Sentinels sent by the selection widgets for "every class" / "every company".
ALL_CLASSES = "__ALL__"
ALL_COMPANIES = "__ALL_EMPRESAS__"

DEFAULT_INSTITUTION = "SENAI - MARACANÃ"
DEFAULT_PROGRAM = "PROGRAMA DE APRENDIZAGEM INDUSTRIAL"
REPORT_TITLE = "Relatório de Frequência - Aprendizes"
