from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .config import Settings
from .core.constants import DEFAULT_TIMEZONE
from .database.connection import DBConfig, DatabaseConnection
from .sites.mysql_site_repository import MySQLSiteRepository
from .sites.repository import SiteRepository
from .sites.service import SiteService
from .workers.mysql_worker_repository import MySQLWorkerRepository
from .workers.repository import WorkerRepository


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    sites_repo: SiteRepository
    workers_repo: WorkerRepository
    attendance_repo: AttendanceRepository

    site_service: SiteService
    attendance_service: AttendanceService


def wire(
    *,
    sites_repo: SiteRepository,
    workers_repo: WorkerRepository,
    attendance_repo: AttendanceRepository,
    conn: Optional[DatabaseConnection] = None,
    clock=None,
    default_timezone: str = DEFAULT_TIMEZONE,
) -> Container:
    return Container(
        conn=conn,
        sites_repo=sites_repo,
        workers_repo=workers_repo,
        attendance_repo=attendance_repo,
        site_service=SiteService(sites_repo, default_timezone=default_timezone),
        attendance_service=AttendanceService(attendance_repo, workers_repo, sites_repo, clock=clock),
    )


def build_container(settings: Settings) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(settings.db_config))
    return wire(
        sites_repo=MySQLSiteRepository(conn),
        workers_repo=MySQLWorkerRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        conn=conn,
        default_timezone=settings.default_timezone,
    )
