"""Great-circle distance between two points."""

import math

from lanka_travel.api.models import GeoPoint

EARTH_RADIUS_KM = 6371


def distance_km(point_a: GeoPoint, point_b: GeoPoint) -> float:
    """Return the haversine distance between two points in kilometres.

    Coordinates are not range-checked; callers supply valid degrees.
    """
    lat1 = math.radians(point_a.latitude)
    lat2 = math.radians(point_b.latitude)
    d_lat = math.radians(point_b.latitude - point_a.latitude)
    d_lon = math.radians(point_b.longitude - point_a.longitude)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    )
    a = min(a, 1.0)  # float error near antipodal points
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


__all__ = ["distance_km", "EARTH_RADIUS_KM"]
