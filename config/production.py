import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

MAX_UPLOAD_MB = int(os.getenv("MAX_UPLOAD_MB", "20"))

REPORT_INSTITUTION = os.getenv("REPORT_INSTITUTION", "SENAI - MARACANÃ")
REPORT_PROGRAM = os.getenv("REPORT_PROGRAM", "PROGRAMA DE APRENDIZAGEM INDUSTRIAL")
