"""Tests for CalculateDistanceUseCase and coordinate parsing."""

import math

import pytest

from greatcircle.application.use_cases.calculate_distance import (
    CalculateDistanceUseCase,
    parse_coordinate_argument,
    parse_coordinates,
)
from greatcircle.domain.errors import InvalidNumericArgumentError, UsageError
from greatcircle.domain.value_objects.geo_point import GeoPoint

# ─── parse_coordinate_argument ───────────────────────────────────────


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("40.7128", 40.7128),
        ("-74.0060", -74.006),
        ("+12", 12.0),
        (" 0.5 ", 0.5),
        ("1e1", 10.0),
        ("-5.", -5.0),
        (".5", 0.5),
        ("-1e-3", -0.001),
        ("-1E2", -100.0),
    ],
)
def test_parse_accepts_decimal_strings(raw, expected):
    assert parse_coordinate_argument("lat1", raw) == expected


@pytest.mark.parametrize(
    "raw",
    ["", "abc", "12abc", "1,5", "nan", "inf", "-Infinity", "1_0", "\u0661\u0662", "0x10", "1e999"],
)
def test_parse_rejects_non_numeric(raw):
    with pytest.raises(InvalidNumericArgumentError) as exc_info:
        parse_coordinate_argument("lon2", raw)
    assert exc_info.value.name == "lon2"
    assert exc_info.value.raw == raw
    assert "invalid numeric argument for lon2" in str(exc_info.value)


# ─── parse_coordinates ───────────────────────────────────────────────


def test_parse_coordinates_order():
    origin, destination = parse_coordinates(["1", "2", "3", "4"])
    assert origin == GeoPoint(latitude=1.0, longitude=2.0)
    assert destination == GeoPoint(latitude=3.0, longitude=4.0)


@pytest.mark.parametrize("count", [0, 1, 2, 3, 5])
def test_parse_coordinates_wrong_count(count):
    with pytest.raises(UsageError) as exc_info:
        parse_coordinates(["1"] * count)
    assert str(exc_info.value) == "Usage: haversine lat1 lon1 lat2 lon2"


def test_parse_coordinates_names_offending_argument():
    with pytest.raises(InvalidNumericArgumentError) as exc_info:
        parse_coordinates(["1", "2", "north", "4"])
    assert exc_info.value.name == "lat2"


# ─── CalculateDistanceUseCase ────────────────────────────────────────


def test_execute_identical_points():
    p = GeoPoint(latitude=-33.8688, longitude=151.2093)
    result = CalculateDistanceUseCase().execute(p, p)
    assert result.haversine_term == 0.0
    assert result.miles == 0.0
    assert result.kilometers == 0.0


def test_execute_equator_quarter_turn():
    result = CalculateDistanceUseCase().execute_args(["0", "0", "0", "90"])
    assert result.haversine_term == pytest.approx(1.0)
    assert result.kilometers == pytest.approx(6378 * math.pi)
    assert result.miles == pytest.approx(3963 * math.pi)
    assert result.kilometers == pytest.approx(20037.1, abs=0.5)


def test_execute_symmetric(new_york, london):
    use_case = CalculateDistanceUseCase()
    forward = use_case.execute(new_york, london)
    backward = use_case.execute(london, new_york)
    assert forward.kilometers == pytest.approx(backward.kilometers)
    assert forward.miles == pytest.approx(backward.miles)


def test_execute_unit_consistency(new_york, london):
    result = CalculateDistanceUseCase().execute(new_york, london)
    assert result.miles / result.kilometers == pytest.approx(3963 / 6378)
    assert result.miles / result.kilometers == pytest.approx(0.6214, abs=1e-4)


def test_execute_custom_radius():
    result = CalculateDistanceUseCase(radius_miles=1.0, radius_km=2.0).execute_args(
        ["0", "0", "0", "180"]
    )
    assert result.miles == pytest.approx(math.pi)
    assert result.kilometers == pytest.approx(2 * math.pi)


def test_execute_args_wrong_count_does_not_compute():
    with pytest.raises(UsageError):
        CalculateDistanceUseCase().execute_args(["0", "0", "0"])
