from __future__ import annotations

from dataclasses import dataclass
from math import atan2, cos, radians, sin, sqrt

from ..core.constants import EARTH_RADIUS_METERS, GEOFENCE_TOLERANCE_METERS


@dataclass(frozen=True)
class Position:
    """A device fix or site centre in decimal degrees."""

    latitude: float
    longitude: float


def distance_meters(a: Position, b: Position) -> float:
    """Great-circle distance between two positions (haversine)."""
    φ1, φ2 = radians(a.latitude), radians(b.latitude)
    Δφ = radians(b.latitude - a.latitude)
    Δλ = radians(b.longitude - a.longitude)

    h = sin(Δφ / 2) ** 2 + cos(φ1) * cos(φ2) * sin(Δλ / 2) ** 2
    c = 2 * atan2(sqrt(h), sqrt(1 - h))
    return EARTH_RADIUS_METERS * c


def inside_radius(distance_m: float, radius_m: float) -> bool:
    # Boundary counts as inside.
    return distance_m <= radius_m + GEOFENCE_TOLERANCE_METERS


def within_radius(current: Position, center: Position, radius_m: float) -> bool:
    return inside_radius(distance_meters(current, center), radius_m)
