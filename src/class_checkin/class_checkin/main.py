from __future__ import annotations

import atexit
import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.logging_setup import setup_logging
from .container import Container, build_container
from .core.constants import DEFAULT_TERM_END, DEFAULT_TERM_START, DEFAULT_TIMEZONE
from .database.bootstrap import ensure_indexes
from .reports.controller import register as register_reports
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    if container is None:
        db_config = getattr(settings, "MONGO_CONFIG")
        logger.info("settings=%s db=%s", settings_module, db_config.get("database"))

        container = build_container(
            db_config=db_config,
            google_client_id=getattr(settings, "GOOGLE_CLIENT_ID", ""),
            instructor_email=getattr(settings, "INSTRUCTOR_EMAIL"),
            timezone=getattr(settings, "TIMEZONE", DEFAULT_TIMEZONE),
            term_start=getattr(settings, "TERM_START", DEFAULT_TERM_START),
            term_end=getattr(settings, "TERM_END", DEFAULT_TERM_END),
        )
        if bool(getattr(settings, "AUTO_INIT_DB", False)) and container.conn is not None:
            ensure_indexes(container.conn)
        atexit.register(container.close)

    app.extensions["class_checkin"] = container

    register_users(app, container)
    register_attendance(app, container)
    register_reports(app, container)

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    return app
