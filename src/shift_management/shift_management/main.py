from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .core.constants import DEFAULT_HOURLY_WAGE
from .coverage.controller import register as register_coverage
from .payroll.controller import register as register_payroll
from .wages.controller import register as register_wages


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.sort_keys = False
    app.logger.setLevel(getattr(logging, str(getattr(settings, "LOG_LEVEL", "INFO")).upper(), logging.INFO))

    if container is None:
        default_wage = int(getattr(settings, "DEFAULT_HOURLY_WAGE", DEFAULT_HOURLY_WAGE))
        container = build_container(db_config=db_config, default_wage=default_wage)
        app.logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

    register_payroll(app, container)
    register_coverage(app, container)
    register_wages(app, container)

    return app
