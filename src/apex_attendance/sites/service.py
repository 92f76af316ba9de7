from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.datetime_utils import TimeOfDay, require_zone
from ..common.validators import (
    require_bool,
    require_latitude,
    require_longitude,
    require_non_empty,
    require_positive,
)
from ..core.constants import DEFAULT_TIMEZONE
from ..core.exceptions import NotFoundError, ValidationError
from ..geo.geofence import Position
from .model import Site
from .repository import SiteRepository

logger = logging.getLogger(__name__)


class SiteService:
    """Admin-side configuration of sites (geofence and check-in window)."""

    def __init__(self, sites: SiteRepository, *, default_timezone: str = DEFAULT_TIMEZONE):
        self._sites = sites
        self._default_timezone = default_timezone

    def list_sites(self) -> Sequence[Site]:
        return self._sites.list_all()

    def get(self, site_id: str) -> Site:
        site = self._sites.get_by_id(site_id)
        if not site:
            raise NotFoundError(f"Site {site_id!r} does not exist")
        return site

    def create(
        self,
        *,
        site_id: str,
        name: str,
        latitude,
        longitude,
        radius_meters,
        checkin_start: str,
        checkin_end: str,
        timezone: Optional[str] = None,
        is_active: bool = True,
    ) -> Site:
        site_id = require_non_empty(site_id, "site_id")
        if self._sites.get_by_id(site_id):
            raise ValidationError(f"Site {site_id!r} already exists")

        site = self._build(
            site_id=site_id,
            name=name,
            latitude=latitude,
            longitude=longitude,
            radius_meters=radius_meters,
            checkin_start=checkin_start,
            checkin_end=checkin_end,
            timezone=timezone or self._default_timezone,
            is_active=is_active,
        )
        self._sites.create(site)
        logger.info("Site %s created (radius=%sm, window=%s-%s)", site.site_id, site.radius_meters, site.checkin_start, site.checkin_end)
        return site

    def update(self, site_id: str, **changes) -> Site:
        """Apply a partial update. Unknown keys are rejected."""
        current = self.get(site_id)
        allowed = {
            "name",
            "latitude",
            "longitude",
            "radius_meters",
            "checkin_start",
            "checkin_end",
            "timezone",
            "is_active",
        }
        unknown = set(changes) - allowed
        if unknown:
            raise ValidationError(f"Unknown site fields: {', '.join(sorted(unknown))}")

        merged = {
            "name": current.name,
            "latitude": current.center.latitude,
            "longitude": current.center.longitude,
            "radius_meters": current.radius_meters,
            "checkin_start": str(current.checkin_start),
            "checkin_end": str(current.checkin_end),
            "timezone": current.timezone,
            "is_active": current.is_active,
        }
        merged.update({k: v for k, v in changes.items() if v is not None})

        site = self._build(site_id=current.site_id, **merged)
        if not self._sites.update(site):
            raise NotFoundError(f"Site {site_id!r} does not exist")
        logger.info("Site %s updated", site.site_id)
        return site

    def _build(
        self,
        *,
        site_id: str,
        name: str,
        latitude,
        longitude,
        radius_meters,
        checkin_start,
        checkin_end,
        timezone: str,
        is_active,
    ) -> Site:
        start = TimeOfDay.parse(checkin_start)
        end = TimeOfDay.parse(checkin_end)
        # Overnight windows would never admit a check-in; refuse them up front.
        if end < start:
            raise ValidationError("Check-in end time must not be earlier than start time")
        require_zone(timezone)

        return Site(
            site_id=site_id,
            name=require_non_empty(name, "name"),
            center=Position(latitude=require_latitude(latitude), longitude=require_longitude(longitude)),
            radius_meters=require_positive(radius_meters, "radius_meters"),
            checkin_start=start,
            checkin_end=end,
            timezone=timezone,
            is_active=require_bool(is_active, "is_active"),
        )
