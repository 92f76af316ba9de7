from __future__ import annotations

import logging
from pathlib import Path

from dotenv import load_dotenv

from apex_attendance.config import load_settings
from apex_attendance.database.bootstrap import apply_schema, list_tables
from apex_attendance.database.connection import DBConfig, DatabaseConnection

logger = logging.getLogger("init_db")


def main() -> None:
    load_dotenv(override=False)
    settings = load_settings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(message)s")

    conn = DatabaseConnection(DBConfig.from_dict(settings.db_config))
    schema_path = Path(__file__).resolve().parents[1] / "database" / "schema.sql"
    apply_schema(conn, schema_path=schema_path)

    db = conn.config
    logger.info(
        "Applied schema.sql -> %s@%s:%s/%s (tables=%d)",
        db.user,
        db.host,
        db.port,
        db.database,
        len(list_tables(conn)),
    )


if __name__ == "__main__":
    main()
