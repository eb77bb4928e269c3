"""
Geographic points and great-circle distances.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from worldmap.utils import meters_to_kilometers

EARTH_RADIUS = 6_371_000.0  # [m]


@dataclass
class GeoPoint:
    """
    A named location that can be placed on the map.

    Latitude and longitude are plain degrees. They are not clamped or checked;
    out-of-range values simply yield distorted distances.
    """
    name: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    info: str = ""
    color: Optional[str] = None  # e.g. "#00ff00", None -> host default

    def distance_to(self, other: GeoPoint) -> float:
        """Great-circle distance to another point in meters."""
        return distance_between(self, other)


def distance_meters(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Haversine distance between two coordinates on a sphere of radius EARTH_RADIUS.

    Args:
        lat1: Latitude of the first point in degrees.
        lon1: Longitude of the first point in degrees.
        lat2: Latitude of the second point in degrees.
        lon2: Longitude of the second point in degrees.

    Returns:
        Distance in meters. NaN or infinite inputs give a NaN result instead
        of raising.
    """
    with np.errstate(invalid="ignore"):
        phi1 = np.radians(lat1)
        phi2 = np.radians(lat2)
        delta_phi = np.radians(lat2 - lat1)
        delta_lambda = np.radians(lon2 - lon1)

        a = (
            np.sin(delta_phi * 0.5) ** 2
            + np.cos(phi1) * np.cos(phi2) * np.sin(delta_lambda * 0.5) ** 2
        )
        # rounding may push antipodal points marginally above 1
        a = np.clip(a, 0.0, 1.0)
        c = 2.0 * np.arctan2(np.sqrt(a), np.sqrt(1.0 - a))

    return float(EARTH_RADIUS * c)


def distance_between(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance between two points in meters."""
    return distance_meters(a.latitude, a.longitude, b.latitude, b.longitude)


def distance_kilometers(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance between two points in kilometers."""
    return meters_to_kilometers(distance_between(a, b))
