"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

EARTH_RADIUS_METERS = 6_371_000
DEFAULT_TIMEZONE = "Asia/Seoul"
MYSQL_DUPLICATE_KEY_ERRNO = 1062
# Absorbs haversine rounding so a point exactly on the boundary stays inside.
GEOFENCE_TOLERANCE_METERS = 1e-6
