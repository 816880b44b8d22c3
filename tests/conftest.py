"""Pytest configuration and shared fixtures."""

import pytest

from greatcircle.domain.value_objects.geo_point import GeoPoint


@pytest.fixture
def new_york():
    return GeoPoint(latitude=40.7128, longitude=-74.0060)


@pytest.fixture
def london():
    return GeoPoint(latitude=51.5074, longitude=-0.1278)


@pytest.fixture
def null_island():
    return GeoPoint(latitude=0.0, longitude=0.0)
