from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def exists(self, worker_id: str, work_date: date) -> bool:
        raise NotImplementedError

    def get_for_worker_and_date(self, worker_id: str, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def insert(
        self,
        *,
        worker_id: str,
        site_id: str,
        work_date: date,
        created_at: datetime,
    ) -> AttendanceRecord:
        """Create the day's record.

        Raises DuplicateAttendanceError when (worker_id, work_date) already exists.
        """

        raise NotImplementedError

    def list_for_worker_between(self, worker_id: str, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
