"""WSGI entry point: ``flask --app wsgi run`` or ``gunicorn wsgi:app``."""

from src.frequency_report.frequency_report.main import create_app

app = create_app()
