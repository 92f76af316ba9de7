from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one check-in per worker per site-local day."""

    attendance_id: int
    worker_id: str
    site_id: str
    work_date: date
    created_at: datetime

    def to_dict(self) -> dict:
        return {
            "attendance_id": self.attendance_id,
            "worker_id": self.worker_id,
            "site_id": self.site_id,
            "work_date": self.work_date.strftime("%Y-%m-%d"),
            "created_at": self.created_at.isoformat(),
        }
