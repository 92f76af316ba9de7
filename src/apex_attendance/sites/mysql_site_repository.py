from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import mysql_time_of_day, transaction
from ..geo.geofence import Position
from .model import Site
from .repository import SiteRepository

_COLUMNS = """
    site_id, name, latitude, longitude, checkin_radius_m,
    checkin_start_time, checkin_end_time, timezone, is_active
"""


def _row_to_site(r: dict) -> Site:
    return Site(
        site_id=str(r["site_id"]),
        name=r["name"],
        center=Position(latitude=float(r["latitude"]), longitude=float(r["longitude"])),
        radius_meters=float(r["checkin_radius_m"]),
        checkin_start=mysql_time_of_day(r["checkin_start_time"]),
        checkin_end=mysql_time_of_day(r["checkin_end_time"]),
        timezone=r["timezone"],
        is_active=bool(r.get("is_active", True)),
    )


class MySQLSiteRepository(SiteRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, site_id: str) -> Optional[Site]:
        with transaction(self._conn_factory) as cur:
            cur.execute(f"SELECT {_COLUMNS} FROM sites WHERE site_id=%s", (site_id,))
            r = cur.fetchone()
            return _row_to_site(r) if r else None

    def list_all(self) -> Sequence[Site]:
        with transaction(self._conn_factory) as cur:
            cur.execute(f"SELECT {_COLUMNS} FROM sites ORDER BY name ASC")
            return [_row_to_site(r) for r in cur.fetchall()]

    def create(self, site: Site) -> None:
        with transaction(self._conn_factory) as cur:
            cur.execute(
                """
                INSERT INTO sites(site_id, name, latitude, longitude, checkin_radius_m,
                                  checkin_start_time, checkin_end_time, timezone, is_active)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    site.site_id,
                    site.name,
                    site.center.latitude,
                    site.center.longitude,
                    site.radius_meters,
                    site.checkin_start.to_time(),
                    site.checkin_end.to_time(),
                    site.timezone,
                    int(site.is_active),
                ),
            )

    def update(self, site: Site) -> bool:
        with transaction(self._conn_factory) as cur:
            cur.execute(
                """
                UPDATE sites
                SET name=%s, latitude=%s, longitude=%s, checkin_radius_m=%s,
                    checkin_start_time=%s, checkin_end_time=%s, timezone=%s, is_active=%s
                WHERE site_id=%s
                """,
                (
                    site.name,
                    site.center.latitude,
                    site.center.longitude,
                    site.radius_meters,
                    site.checkin_start.to_time(),
                    site.checkin_end.to_time(),
                    site.timezone,
                    int(site.is_active),
                    site.site_id,
                ),
            )
            return cur.rowcount > 0
