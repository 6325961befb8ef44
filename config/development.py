import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Upload limit for the attendance extract
MAX_UPLOAD_MB = int(os.getenv("MAX_UPLOAD_MB", "20"))

# Title lines of the exported report
REPORT_INSTITUTION = os.getenv("REPORT_INSTITUTION", "SENAI - MARACANÃ")
REPORT_PROGRAM = os.getenv("REPORT_PROGRAM", "PROGRAMA DE APRENDIZAGEM INDUSTRIAL")
