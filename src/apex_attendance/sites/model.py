from __future__ import annotations

from dataclasses import dataclass

from ..common.datetime_utils import TimeOfDay
from ..core.constants import DEFAULT_TIMEZONE
from ..geo.geofence import Position


@dataclass(frozen=True)
class Site:
    """Domain entity: a work site with a circular geofence and a daily check-in window."""

    site_id: str
    name: str
    center: Position
    radius_meters: float
    checkin_start: TimeOfDay
    checkin_end: TimeOfDay
    timezone: str = DEFAULT_TIMEZONE
    is_active: bool = True

    def to_dict(self) -> dict:
        return {
            "site_id": self.site_id,
            "name": self.name,
            "latitude": self.center.latitude,
            "longitude": self.center.longitude,
            "radius_meters": self.radius_meters,
            "checkin_start_time": str(self.checkin_start),
            "checkin_end_time": str(self.checkin_end),
            "timezone": self.timezone,
            "is_active": self.is_active,
        }
