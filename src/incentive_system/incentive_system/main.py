from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .core.exceptions import ValidationError
from .database.bootstrap import apply_schema, list_tables
from .database.connection import DBConfig, DatabaseConnection
from .eotm.controller import register as register_eotm
from .leaderboard.controller import register as register_leaderboard
from .payroll.controller import register as register_payroll
from .points.controller import register as register_points

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    # Only install a handler when the host application has not configured one.
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format="%(asctime)s - %(levelname)s - %(name)s - %(message)s")
    else:
        root.setLevel(level)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    configure_logging(str(getattr(settings, "LOG_LEVEL", "INFO")).upper())

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "[incentive-system] settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            conn = DatabaseConnection(DBConfig.from_dict(db_config))
            apply_schema(conn)
            logger.info("[incentive-system] schema ready (tables=%d)", len(list_tables(conn)))

        container = build_container(
            db_config=db_config,
            bonus_rates=getattr(settings, "BONUS_RATES", None),
            late_tolerance_minutes=getattr(settings, "LATE_TOLERANCE_MINUTES", 10),
            early_bird_minutes=getattr(settings, "EARLY_BIRD_MINUTES", 30),
        )

    app.extensions["incentive_container"] = container

    @app.errorhandler(ValidationError)
    def handle_validation_error(exc: ValidationError):
        return jsonify({"error": str(exc)}), 400

    register_points(app, container)
    register_attendance(app, container)
    register_payroll(app, container)
    register_leaderboard(app, container)
    register_eotm(app, container)

    return app
