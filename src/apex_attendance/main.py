from __future__ import annotations

import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask, jsonify

from .attendance.controller import register as register_attendance
from .config import Settings, load_settings
from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables
from .sites.controller import register as register_sites

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[2] / "database" / "schema.sql"


def create_app(settings: Settings | None = None, container: Container | None = None) -> Flask:
    load_dotenv(override=False)
    settings = settings or load_settings()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = Flask(__name__)
    app.secret_key = settings.secret_key
    app.config["DEBUG"] = settings.debug
    app.config["TESTING"] = settings.testing

    if container is None:
        container = build_container(settings)
        db = container.conn.config
        logger.info("Using database %s@%s:%s/%s", db.user, db.host, db.port, db.database)
        if settings.auto_init_db:
            apply_schema(container.conn, schema_path=SCHEMA_PATH)
            logger.debug("Schema ready (tables=%d)", len(list_tables(container.conn)))

    app.extensions["apex_attendance"] = container

    register_attendance(app, container)
    register_sites(app, container)

    @app.route("/healthz", endpoint="healthz")
    def healthz():
        return jsonify({"status": "ok"}), 200

    return app
