from __future__ import annotations

import atexit
import importlib
import logging
import os
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from .config import get_settings_module
from .container import Container, build_container
from .common.web import register_error_handlers
from .core.constants import DEFAULT_REPORT_COUNT_STRATEGY
from .database.bootstrap import apply_schema, list_tables
from .database.connection import DBConfig
from .attendance.controller import register as register_attendance
from .laborers.controller import register as register_laborers
from .notes.controller import register as register_notes
from .payroll.controller import register as register_payroll

logger = logging.getLogger("farm_ledger")


def create_app(*, container: Optional[Container] = None, settings_module: Optional[str] = None) -> Flask:
    """Application factory.

    When no container is passed, the MySQL-backed one is built from the
    settings module and its connection is closed at interpreter exit.
    """

    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        config = DBConfig.from_dict(db_config)
        logger.info("settings=%s db=%s@%s:%s/%s", settings_module, config.user, config.host, config.port, config.database)

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(config)
            logger.info("schema ready (tables=%d)", len(list_tables(config)))

        container = build_container(
            db_config=db_config,
            report_strategy=getattr(settings, "REPORT_COUNT_STRATEGY", DEFAULT_REPORT_COUNT_STRATEGY),
        )
        atexit.register(container.close)

    app.extensions["farm_ledger"] = container

    @app.route("/healthz", methods=["GET"], endpoint="healthz")
    def healthz():
        return jsonify({"status": "ok"})

    register_error_handlers(app)
    register_laborers(app, container)
    register_attendance(app, container)
    register_payroll(app, container)
    register_notes(app, container)

    return app


def run() -> None:
    app = create_app()
    app.run(host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "3000")))


if __name__ == "__main__":  # pragma: no cover
    run()
