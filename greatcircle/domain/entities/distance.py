"""DistanceResult entity — one great-circle distance in two unit systems."""

from dataclasses import dataclass

from greatcircle.domain.value_objects.geo_point import GeoPoint


@dataclass(frozen=True)
class DistanceResult:
    origin: GeoPoint
    destination: GeoPoint
    haversine_term: float
    miles: float
    kilometers: float
