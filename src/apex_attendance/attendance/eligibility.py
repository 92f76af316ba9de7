"""Check-in eligibility: geofence, time window and the once-a-day rule.

Everything here is pure. ``can_check_in`` never raises; a blocked check-in
is reported through ``CheckInDecision.reason``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from ..common.datetime_utils import TimeOfDay
from ..core.enums import CheckInBlockReason
from ..geo.geofence import Position, distance_meters, inside_radius, within_radius
from ..sites.model import Site

TimeLike = Union[TimeOfDay, str]

REASON_MESSAGES = {
    CheckInBlockReason.NONE: "Check-in is available.",
    CheckInBlockReason.ALREADY_CHECKED_IN: "You have already checked in today.",
    CheckInBlockReason.LOCATION_UNAVAILABLE: "Location is unavailable. Please turn on location services.",
    CheckInBlockReason.OUT_OF_RANGE: "You are outside the site's check-in radius.",
    CheckInBlockReason.OUTSIDE_TIME_WINDOW: "Check-in is not open at this time.",
}


@dataclass(frozen=True)
class CheckInDecision:
    allowed: bool
    reason: CheckInBlockReason
    distance_meters: Optional[float] = None

    @property
    def message(self) -> str:
        return REASON_MESSAGES[self.reason]

    def to_dict(self) -> dict:
        return {
            "allowed": self.allowed,
            "reason": self.reason.value,
            "message": self.message,
            "distance_meters": None if self.distance_meters is None else round(self.distance_meters, 1),
        }


ALREADY_CHECKED_IN = CheckInDecision(allowed=False, reason=CheckInBlockReason.ALREADY_CHECKED_IN)


def is_within_radius(current: Position, site: Site) -> bool:
    return within_radius(current, site.center, site.radius_meters)


def _window_contains(now_local: TimeOfDay, start: TimeOfDay, end: TimeOfDay) -> bool:
    # A window with end < start admits nothing.
    return start <= now_local <= end


def is_within_time_window(now_local: TimeLike, start: TimeLike, end: TimeLike) -> bool:
    """Inclusive on both ends. String inputs are parsed and may raise ValidationError."""
    return _window_contains(TimeOfDay.parse(now_local), TimeOfDay.parse(start), TimeOfDay.parse(end))


def can_check_in(
    has_checked_in_today: bool,
    current: Optional[Position],
    site: Site,
    now_local: TimeOfDay,
) -> CheckInDecision:
    """Decide whether a check-in is allowed.

    ``now_local`` must already be a TimeOfDay; parse request strings before
    calling so that this function never raises.
    """
    # First failing rule wins; "already checked in" skips the GPS math entirely.
    if has_checked_in_today:
        return ALREADY_CHECKED_IN

    if current is None:
        return CheckInDecision(allowed=False, reason=CheckInBlockReason.LOCATION_UNAVAILABLE)

    distance = distance_meters(current, site.center)
    if not inside_radius(distance, site.radius_meters):
        return CheckInDecision(allowed=False, reason=CheckInBlockReason.OUT_OF_RANGE, distance_meters=distance)

    if not _window_contains(now_local, site.checkin_start, site.checkin_end):
        return CheckInDecision(allowed=False, reason=CheckInBlockReason.OUTSIDE_TIME_WINDOW, distance_meters=distance)

    return CheckInDecision(allowed=True, reason=CheckInBlockReason.NONE, distance_meters=distance)
