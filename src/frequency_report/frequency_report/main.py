from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .dataset.controller import register as register_dataset
from .report.controller import register as register_report

logger = logging.getLogger(__name__)


def create_app(container: Container | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["MAX_CONTENT_LENGTH"] = int(getattr(settings, "MAX_UPLOAD_MB", 20)) * 1024 * 1024
    app.config["REPORT_INSTITUTION"] = getattr(settings, "REPORT_INSTITUTION")
    app.config["REPORT_PROGRAM"] = getattr(settings, "REPORT_PROGRAM")

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info("frequency-report settings=%s debug=%s", settings_module, app.config["DEBUG"])

    container = container or build_container()

    register_dataset(app, container)
    register_report(app, container)

    return app
