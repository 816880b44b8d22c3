"""CalculateDistanceUseCase — parse four coordinates and measure the arc between them."""

from __future__ import annotations

import logging
import math
import re
from typing import Sequence

from greatcircle.domain.entities.distance import DistanceResult
from greatcircle.domain.errors import InvalidNumericArgumentError, UsageError
from greatcircle.domain.value_objects.geo_point import (
    EARTH_RADIUS_KM,
    EARTH_RADIUS_MILES,
    GeoPoint,
    central_distance,
)

logger = logging.getLogger(__name__)

ARGUMENT_NAMES = ("lat1", "lon1", "lat2", "lon2")

# Signed ASCII decimal, optional fraction and exponent; no underscores or non-ASCII digits
DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def parse_coordinate_argument(name: str, raw: str) -> float:
    """Parse one degree value, failing loudly on anything that is not a finite number.

    Args:
        name: argument name used in the error message (e.g. ``lat1``).
        raw: text as given on the command line.

    Raises:
        InvalidNumericArgumentError: if ``raw`` is empty, malformed, or overflows.
    """
    text = raw.strip()
    if not DECIMAL_RE.fullmatch(text):
        raise InvalidNumericArgumentError(name, raw)
    value = float(text)
    if not math.isfinite(value):
        raise InvalidNumericArgumentError(name, raw)
    return value


def parse_coordinates(args: Sequence[str]) -> tuple[GeoPoint, GeoPoint]:
    """Parse ``lat1 lon1 lat2 lon2`` into two points.

    Range is not enforced; out-of-range angles are passed through as-is.

    Raises:
        UsageError: if there are not exactly four arguments.
        InvalidNumericArgumentError: if any argument is not numeric.
    """
    if len(args) != len(ARGUMENT_NAMES):
        raise UsageError()

    lat1, lon1, lat2, lon2 = (
        parse_coordinate_argument(name, raw) for name, raw in zip(ARGUMENT_NAMES, args)
    )
    return GeoPoint(latitude=lat1, longitude=lon1), GeoPoint(latitude=lat2, longitude=lon2)


class CalculateDistanceUseCase:
    """Computes the great-circle distance between two points in miles and kilometers."""

    def __init__(
        self,
        radius_miles: float = EARTH_RADIUS_MILES,
        radius_km: float = EARTH_RADIUS_KM,
    ):
        self._radius_miles = radius_miles
        self._radius_km = radius_km

    def execute(self, origin: GeoPoint, destination: GeoPoint) -> DistanceResult:
        t = origin.haversine_term(destination)
        logger.debug("Haversine term t=%.17g for %s -> %s", t, origin, destination)

        return DistanceResult(
            origin=origin,
            destination=destination,
            haversine_term=t,
            miles=central_distance(t, self._radius_miles),
            kilometers=central_distance(t, self._radius_km),
        )

    def execute_args(self, args: Sequence[str]) -> DistanceResult:
        """Parse raw command-line values and compute the distance."""
        origin, destination = parse_coordinates(args)
        return self.execute(origin, destination)
