from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.logging_config import configure_logging
from .core.constants import DEFAULT_CLASS_NAME
from .container import build_container
from .roster.controller import register as register_roster

logger = logging.getLogger(__name__)


def create_app(settings_module: str | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    configure_logging(debug=app.config["DEBUG"], level=getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info("roster-system starting with settings=%s", settings_module)

    container = build_container(seed_class_name=getattr(settings, "SEED_CLASS_NAME", None) or DEFAULT_CLASS_NAME)
    app.extensions["roster_container"] = container

    register_roster(app, container)

    return app
