from __future__ import annotations

import math

from ..core.constants import EARTH_RADIUS_KM
from .model import AreaConfig, Coordinate, GeoTag


def distance_km(p1: Coordinate, p2: Coordinate) -> float:
    """Great-circle distance in kilometers (haversine).

    Coordinates are not range-checked; out-of-range values give a defined but
    meaningless result.
    """
    lat1_rad = math.radians(p1.lat)
    lat2_rad = math.radians(p2.lat)
    delta_lat = math.radians(p2.lat - p1.lat)
    delta_lng = math.radians(p2.lng - p1.lng)

    a = (math.sin(delta_lat / 2) ** 2 +
         math.cos(lat1_rad) * math.cos(lat2_rad) *
         math.sin(delta_lng / 2) ** 2)
    # Rounding can push `a` just past 1 for antipodal points.
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def is_in_range(point: Coordinate, config: AreaConfig) -> bool:
    return distance_km(point, config.center) <= config.radius_km


def tag_location(lat: float, lng: float, config: AreaConfig) -> GeoTag:
    point = Coordinate(lat=float(lat), lng=float(lng))
    return GeoTag(lat=point.lat, lng=point.lng, inside=is_in_range(point, config))
