"""GeoPoint value object — immutable (lat, lon) pair in degrees."""

from __future__ import annotations

import math
from dataclasses import dataclass

# Earth approximated as a perfect sphere
EARTH_RADIUS_MILES = 3963.0
EARTH_RADIUS_KM = 6378.0

DEG_TO_RAD = math.pi / 180


@dataclass(frozen=True)
class RadianPoint:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float

    def to_radians(self) -> RadianPoint:
        return RadianPoint(
            latitude=self.latitude * DEG_TO_RAD,
            longitude=self.longitude * DEG_TO_RAD,
        )

    def haversine_term(self, other: GeoPoint) -> float:
        """Square root of the haversine of the central angle between two points.

        Lies in [0, 1] for valid coordinates; ``asin`` of it is half the
        central angle.
        """
        a = self.to_radians()
        b = other.to_radians()

        delta_lat = a.latitude - b.latitude
        delta_lon = a.longitude - b.longitude

        sdlat = math.sin(delta_lat / 2) ** 2
        sdlon = math.sin(delta_lon / 2) ** 2

        # out-of-range latitudes can round the sum just below zero
        radicand = sdlat + math.cos(a.latitude) * math.cos(b.latitude) * sdlon
        return math.sqrt(max(0.0, radicand))

    def distance(self, other: GeoPoint, radius: float) -> float:
        """Great-circle distance to ``other`` on a sphere of the given radius."""
        return central_distance(self.haversine_term(other), radius)

    def distance_km(self, other: GeoPoint) -> float:
        return self.distance(other, EARTH_RADIUS_KM)

    def distance_miles(self, other: GeoPoint) -> float:
        return self.distance(other, EARTH_RADIUS_MILES)


def central_distance(t: float, radius: float) -> float:
    """Turn a haversine term into an arc length: ``2 * r * asin(t)``.

    ``t`` is clamped to [-1, 1] so rounding past the boundary cannot raise
    a math domain error.
    """
    clamped = max(-1.0, min(1.0, t))
    return 2 * radius * math.asin(clamped)
