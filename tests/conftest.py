"""Pytest configuration and shared fixtures."""

import pytest

from wassali.domain.value_objects.geo_point import GeoPoint
from wassali.domain.value_objects.tariff import Tariff


@pytest.fixture
def oran_center():
    return GeoPoint(latitude=35.6971, longitude=-0.6308)


@pytest.fixture
def oran_nearby():
    return GeoPoint(latitude=35.7000, longitude=-0.6400)


@pytest.fixture
def oran_outskirts():
    return GeoPoint(latitude=35.8000, longitude=-0.5000)


@pytest.fixture
def default_tariff():
    return Tariff(minimum_fare=100, per_km_rate=40.0)
