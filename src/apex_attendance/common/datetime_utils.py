from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from typing import Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..core.exceptions import ValidationError


@dataclass(frozen=True, order=True)
class TimeOfDay:
    """Wall-clock time with minute precision, stored as minutes since midnight."""

    minutes: int

    def __post_init__(self):
        if not 0 <= self.minutes < 24 * 60:
            raise ValidationError(f"Time of day out of range: {self.minutes} minutes")

    @classmethod
    def parse(cls, value: Union[str, time, "TimeOfDay"]) -> "TimeOfDay":
        """Parse "HH:MM" (or "HH:MM:SS", seconds ignored) into a TimeOfDay."""
        if isinstance(value, TimeOfDay):
            return value
        if isinstance(value, time):
            return cls.from_time(value)
        if not isinstance(value, str):
            raise ValidationError(f"Invalid time of day: {value!r}")

        parts = value.strip().split(":")
        if len(parts) not in (2, 3) or not all(p.isdigit() for p in parts[:2]):
            raise ValidationError(f"Invalid time of day: {value!r}")
        hours, minutes = int(parts[0]), int(parts[1])
        if hours > 23 or minutes > 59:
            raise ValidationError(f"Invalid time of day: {value!r}")
        return cls(hours * 60 + minutes)

    @classmethod
    def from_time(cls, value: time) -> "TimeOfDay":
        return cls(value.hour * 60 + value.minute)

    @classmethod
    def of(cls, moment: datetime) -> "TimeOfDay":
        return cls.from_time(moment.time())

    def to_time(self) -> time:
        return time(hour=self.minutes // 60, minute=self.minutes % 60)

    def __str__(self) -> str:
        return f"{self.minutes // 60:02d}:{self.minutes % 60:02d}"


def require_zone(tz: str) -> ZoneInfo:
    try:
        return ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValidationError(f"Unknown timezone: {tz!r}") from e


def now_utc() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch it.
    """
    return datetime.now(timezone.utc)


def to_site_local(moment: datetime, tz: str) -> datetime:
    """Convert a moment to the site's wall clock. Naive values are taken as UTC."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(require_zone(tz))


def month_bounds(year: int, month: int) -> tuple[date, date]:
    if not 1 <= int(month) <= 12:
        raise ValidationError(f"Invalid month: {month}")
    start = date(int(year), int(month), 1)
    if start.month == 12:
        next_start = date(start.year + 1, 1, 1)
    else:
        next_start = date(start.year, start.month + 1, 1)
    return start, date.fromordinal(next_start.toordinal() - 1)
