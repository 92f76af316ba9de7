from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional, Sequence

from mysql.connector import errors as mysql_errors

from ..core.constants import MYSQL_DUPLICATE_KEY_ERRNO
from ..core.exceptions import DuplicateAttendanceError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import transaction
from .model import AttendanceRecord
from .repository import AttendanceRepository


def _row_to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        worker_id=str(r["worker_id"]),
        site_id=str(r["site_id"]),
        work_date=r["work_date"],
        created_at=r["created_at"],
    )


def _as_utc_naive(moment: datetime) -> datetime:
    # DATETIME columns hold UTC without an offset.
    if moment.tzinfo is None:
        return moment
    return moment.astimezone(timezone.utc).replace(tzinfo=None)


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def exists(self, worker_id: str, work_date: date) -> bool:
        with transaction(self._conn_factory) as cur:
            cur.execute(
                "SELECT 1 AS found FROM attendance WHERE worker_id=%s AND work_date=%s LIMIT 1",
                (worker_id, work_date),
            )
            return cur.fetchone() is not None

    def get_for_worker_and_date(self, worker_id: str, work_date: date) -> Optional[AttendanceRecord]:
        with transaction(self._conn_factory) as cur:
            cur.execute(
                """
                SELECT attendance_id, worker_id, site_id, work_date, created_at
                FROM attendance
                WHERE worker_id=%s AND work_date=%s
                """,
                (worker_id, work_date),
            )
            r = cur.fetchone()
            return _row_to_record(r) if r else None

    def insert(
        self,
        *,
        worker_id: str,
        site_id: str,
        work_date: date,
        created_at: datetime,
    ) -> AttendanceRecord:
        try:
            with transaction(self._conn_factory) as cur:
                cur.execute(
                    """
                    INSERT INTO attendance(worker_id, site_id, work_date, created_at)
                    VALUES(%s,%s,%s,%s)
                    """,
                    (worker_id, site_id, work_date, _as_utc_naive(created_at)),
                )
                attendance_id = int(cur.lastrowid)
        except mysql_errors.IntegrityError as e:
            if e.errno == MYSQL_DUPLICATE_KEY_ERRNO:
                raise DuplicateAttendanceError(
                    f"Worker {worker_id} already has attendance for {work_date.isoformat()}"
                ) from e
            raise

        return AttendanceRecord(
            attendance_id=attendance_id,
            worker_id=worker_id,
            site_id=site_id,
            work_date=work_date,
            created_at=created_at,
        )

    def list_for_worker_between(self, worker_id: str, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        with transaction(self._conn_factory) as cur:
            cur.execute(
                """
                SELECT attendance_id, worker_id, site_id, work_date, created_at
                FROM attendance
                WHERE worker_id=%s AND work_date BETWEEN %s AND %s
                ORDER BY work_date ASC
                """,
                (worker_id, start_date, end_date),
            )
            return [_row_to_record(r) for r in cur.fetchall()]
