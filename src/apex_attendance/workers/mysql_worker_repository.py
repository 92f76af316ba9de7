from __future__ import annotations

from typing import Optional

from ..core.enums import WorkerStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import transaction
from .model import Worker
from .repository import WorkerRepository


class MySQLWorkerRepository(WorkerRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, worker_id: str) -> Optional[Worker]:
        with transaction(self._conn_factory) as cur:
            cur.execute(
                """
                SELECT worker_id, name, site_id, status
                FROM workers
                WHERE worker_id=%s
                """,
                (worker_id,),
            )
            row = cur.fetchone()
            if not row:
                return None
            return Worker(
                worker_id=str(row["worker_id"]),
                name=row["name"],
                site_id=row.get("site_id"),
                status=WorkerStatus(row["status"]),
            )
