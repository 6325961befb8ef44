SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

MAX_UPLOAD_MB = 1

REPORT_INSTITUTION = "SENAI - MARACANÃ"
REPORT_PROGRAM = "PROGRAMA DE APRENDIZAGEM INDUSTRIAL"
