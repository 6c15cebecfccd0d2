# delivery_nav/domain/geometry.py
import math

import numpy as np

from delivery_nav.domain.entities.geography import Coordinate, Segment

EARTH_RADIUS_MILES = 3963.19
KM_PER_MILE = 1.609344


def distance_earth_miles(a: Coordinate, b: Coordinate) -> float:
    lat1, lon1 = math.radians(a.latitude), math.radians(a.longitude)
    lat2, lon2 = math.radians(b.latitude), math.radians(b.longitude)
    h = (
        math.sin((lat2 - lat1) / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin((lon2 - lon1) / 2) ** 2
    )
    return 2 * EARTH_RADIUS_MILES * math.asin(math.sqrt(h))


def distance_earth_km(a: Coordinate, b: Coordinate) -> float:
    return distance_earth_miles(a, b) * KM_PER_MILE


def segment_miles(seg: Segment) -> float:
    return distance_earth_miles(seg.start, seg.end)


def distances_from(origin: Coordinate, coords: list[Coordinate]) -> np.ndarray:
    """Great-circle miles from `origin` to every coordinate, in input order."""
    if not coords:
        return np.empty(0)
    lat1, lon1 = np.radians(origin.latitude), np.radians(origin.longitude)
    lat2 = np.radians(np.array([c.latitude for c in coords], dtype=float))
    lon2 = np.radians(np.array([c.longitude for c in coords], dtype=float))
    h = (
        np.sin((lat2 - lat1) / 2) ** 2
        + np.cos(lat1) * np.cos(lat2) * np.sin((lon2 - lon1) / 2) ** 2
    )
    return 2 * EARTH_RADIUS_MILES * np.arcsin(np.sqrt(h))


def _wrap_degrees(deg: float) -> float:
    deg = deg % 360.0
    return 0.0 if deg >= 360.0 else deg


def angle_of_line(seg: Segment) -> float:
    """Flat-earth bearing in degrees within [0, 360): east=0, north=90."""
    dy = seg.end.latitude - seg.start.latitude
    dx = seg.end.longitude - seg.start.longitude
    return _wrap_degrees(math.degrees(math.atan2(dy, dx)))


def angle_between(previous: Segment, current: Segment) -> float:
    """Counter-clockwise change of heading from `previous` to `current`, in [0, 360)."""
    return _wrap_degrees(angle_of_line(current) - angle_of_line(previous))
