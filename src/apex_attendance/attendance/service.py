from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import TimeOfDay, month_bounds, now_utc, to_site_local
from ..core.constants import DEFAULT_TIMEZONE
from ..core.exceptions import NotFoundError, ValidationError
from ..geo.geofence import Position
from ..sites.model import Site
from ..sites.repository import SiteRepository
from ..workers.model import Worker
from ..workers.repository import WorkerRepository
from .eligibility import ALREADY_CHECKED_IN, CheckInDecision, can_check_in
from .model import AttendanceRecord
from .repository import AttendanceRepository
from .state import DailyCheckInState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckInContext:
    worker: Worker
    site: Site
    local_now: datetime

    @property
    def work_date(self) -> date:
        return self.local_now.date()

    @property
    def time_of_day(self) -> TimeOfDay:
        return TimeOfDay.of(self.local_now)


@dataclass(frozen=True)
class CheckInResult:
    decision: CheckInDecision
    record: Optional[AttendanceRecord] = None

    @property
    def created(self) -> bool:
        return self.record is not None

    def to_dict(self) -> dict:
        data = self.decision.to_dict()
        data["record"] = self.record.to_dict() if self.record else None
        return data


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        workers: WorkerRepository,
        sites: SiteRepository,
        *,
        clock: Callable[[], datetime] | None = None,
    ):
        self._attendance = attendance
        self._workers = workers
        self._sites = sites
        self._clock = clock or now_utc

    def _context(self, worker_id: str, now: datetime | None) -> CheckInContext:
        worker = self._workers.get_by_id(worker_id)
        if not worker:
            raise NotFoundError("Worker does not exist")
        if not worker.can_attend:
            raise ValidationError("Worker is not approved for a site yet")

        site = self._sites.get_by_id(worker.site_id)
        if not site:
            raise NotFoundError("Assigned site does not exist")
        if not site.is_active:
            raise ValidationError("Assigned site is not active")

        # "Today" follows the site's wall clock, not the server's.
        local_now = to_site_local(now or self._clock(), site.timezone)
        return CheckInContext(worker=worker, site=site, local_now=local_now)

    def evaluate(self, worker_id: str, position: Optional[Position], *, now: datetime | None = None) -> CheckInDecision:
        ctx = self._context(worker_id, now)
        has_checked_in = self._attendance.exists(ctx.worker.worker_id, ctx.work_date)
        return can_check_in(has_checked_in, position, ctx.site, ctx.time_of_day)

    def check_in(self, worker_id: str, position: Optional[Position], *, now: datetime | None = None) -> CheckInResult:
        moment = now or self._clock()
        ctx = self._context(worker_id, moment)

        state = DailyCheckInState(self._attendance.exists(ctx.worker.worker_id, ctx.work_date))
        decision = can_check_in(state.is_checked_in, position, ctx.site, ctx.time_of_day)
        if not decision.allowed:
            logger.info(
                "Check-in blocked worker=%s site=%s reason=%s",
                ctx.worker.worker_id,
                ctx.site.site_id,
                decision.reason.value,
            )
            return CheckInResult(decision=decision)

        record = state.submit(
            lambda: self._attendance.insert(
                worker_id=ctx.worker.worker_id,
                site_id=ctx.site.site_id,
                work_date=ctx.work_date,
                created_at=moment,
            )
        )
        if record is None:
            return CheckInResult(decision=ALREADY_CHECKED_IN)

        logger.info(
            "Check-in recorded worker=%s site=%s date=%s",
            ctx.worker.worker_id,
            ctx.site.site_id,
            ctx.work_date.isoformat(),
        )
        return CheckInResult(decision=decision, record=record)

    def today_record(self, worker_id: str, *, now: datetime | None = None) -> Optional[AttendanceRecord]:
        ctx = self._context(worker_id, now)
        return self._attendance.get_for_worker_and_date(ctx.worker.worker_id, ctx.work_date)

    def local_today(self, worker_id: str, *, now: datetime | None = None) -> date:
        """Calendar date on the worker's site clock; the default zone when no site is assigned."""
        worker = self._workers.get_by_id(worker_id)
        if not worker:
            raise NotFoundError("Worker does not exist")
        site = self._sites.get_by_id(worker.site_id) if worker.site_id else None
        tz = site.timezone if site else DEFAULT_TIMEZONE
        return to_site_local(now or self._clock(), tz).date()

    def monthly_history(self, worker_id: str, year: int, month: int) -> Sequence[AttendanceRecord]:
        worker = self._workers.get_by_id(worker_id)
        if not worker:
            raise NotFoundError("Worker does not exist")
        start, end = month_bounds(year, month)
        return self._attendance.list_for_worker_between(worker.worker_id, start, end)
