from __future__ import annotations

from datetime import date, datetime
from typing import Optional
from zoneinfo import ZoneInfo

import pytest

from apex_attendance.attendance.model import AttendanceRecord
from apex_attendance.common.datetime_utils import TimeOfDay
from apex_attendance.config import Settings
from apex_attendance.container import wire
from apex_attendance.core.enums import WorkerStatus
from apex_attendance.core.exceptions import DuplicateAttendanceError
from apex_attendance.geo.geofence import Position
from apex_attendance.main import create_app
from apex_attendance.sites.model import Site
from apex_attendance.workers.model import Worker

SEOUL = ZoneInfo("Asia/Seoul")
CITY_HALL = Position(37.5665, 126.9780)


class InMemorySites:
    def __init__(self, *sites: Site):
        self.by_id: dict[str, Site] = {s.site_id: s for s in sites}

    def get_by_id(self, site_id: str) -> Optional[Site]:
        return self.by_id.get(site_id)

    def list_all(self):
        return sorted(self.by_id.values(), key=lambda s: s.name)

    def create(self, site: Site) -> None:
        self.by_id[site.site_id] = site

    def update(self, site: Site) -> bool:
        if site.site_id not in self.by_id:
            return False
        self.by_id[site.site_id] = site
        return True


class InMemoryWorkers:
    def __init__(self, *workers: Worker):
        self.by_id: dict[str, Worker] = {w.worker_id: w for w in workers}

    def get_by_id(self, worker_id: str) -> Optional[Worker]:
        return self.by_id.get(worker_id)


class InMemoryAttendance:
    """Mimics the UNIQUE (worker_id, work_date) key of the real table."""

    def __init__(self):
        self.by_worker_date: dict[tuple[str, date], AttendanceRecord] = {}
        self.insert_calls = 0
        self._id = 0

    def exists(self, worker_id: str, work_date: date) -> bool:
        return (worker_id, work_date) in self.by_worker_date

    def get_for_worker_and_date(self, worker_id: str, work_date: date) -> Optional[AttendanceRecord]:
        return self.by_worker_date.get((worker_id, work_date))

    def insert(self, *, worker_id: str, site_id: str, work_date: date, created_at: datetime) -> AttendanceRecord:
        self.insert_calls += 1
        if (worker_id, work_date) in self.by_worker_date:
            raise DuplicateAttendanceError("duplicate")
        self._id += 1
        rec = AttendanceRecord(
            attendance_id=self._id,
            worker_id=worker_id,
            site_id=site_id,
            work_date=work_date,
            created_at=created_at,
        )
        self.by_worker_date[(worker_id, work_date)] = rec
        return rec

    def list_for_worker_between(self, worker_id: str, start_date: date, end_date: date):
        items = [
            r
            for (wid, d), r in self.by_worker_date.items()
            if wid == worker_id and start_date <= d <= end_date
        ]
        return sorted(items, key=lambda r: r.work_date)


def make_site(**overrides) -> Site:
    values = dict(
        site_id="S1",
        name="City Hall",
        center=CITY_HALL,
        radius_meters=50,
        checkin_start=TimeOfDay.parse("09:00"),
        checkin_end=TimeOfDay.parse("18:00"),
    )
    values.update(overrides)
    return Site(**values)


def make_worker(**overrides) -> Worker:
    values = dict(worker_id="W1", name="Kim", site_id="S1", status=WorkerStatus.APPROVED)
    values.update(overrides)
    return Worker(**values)


@pytest.fixture
def site() -> Site:
    return make_site()


@pytest.fixture
def sites_repo(site) -> InMemorySites:
    return InMemorySites(site)


@pytest.fixture
def workers_repo() -> InMemoryWorkers:
    return InMemoryWorkers(
        make_worker(),
        make_worker(worker_id="W2", name="Lee", status=WorkerStatus.PENDING),
    )


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 10, 0, tzinfo=SEOUL)


@pytest.fixture
def container(sites_repo, workers_repo, attendance_repo, fixed_now):
    return wire(
        sites_repo=sites_repo,
        workers_repo=workers_repo,
        attendance_repo=attendance_repo,
        clock=lambda: fixed_now,
    )


@pytest.fixture
def app(container):
    app = create_app(Settings(secret_key="test-secret", testing=True, log_level="WARNING"), container=container)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def site_factory():
    return make_site


@pytest.fixture
def worker_factory():
    return make_worker
