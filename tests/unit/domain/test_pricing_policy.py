"""Tests for PricingPolicy."""

import math

import pytest

from wassali.domain.errors import MissingPoint
from wassali.domain.policies.pricing import compute_distance_km, compute_price, quote_route
from wassali.domain.value_objects.geo_point import GeoPoint
from wassali.domain.value_objects.tariff import Tariff

# ─── compute_distance_km ─────────────────────────────────────────────


def test_distance_to_self_is_zero(oran_center):
    assert compute_distance_km(oran_center, oran_center) == 0.0


@pytest.mark.parametrize(
    "a, b",
    [
        ((35.6971, -0.6308), (35.8, -0.5)),
        ((-33.9, 18.4), (51.5, -0.1)),
        ((89.0, 179.0), (-89.0, -179.0)),
    ],
)
def test_distance_is_symmetric(a, b):
    pa, pb = GeoPoint(*a), GeoPoint(*b)
    assert compute_distance_km(pa, pb) == pytest.approx(compute_distance_km(pb, pa))


def test_distance_missing_pickup_raises(oran_center):
    with pytest.raises(MissingPoint):
        compute_distance_km(None, oran_center)


def test_distance_missing_dropoff_raises(oran_center):
    with pytest.raises(MissingPoint):
        compute_distance_km(oran_center, None)


# ─── compute_price ───────────────────────────────────────────────────


def test_price_at_zero_is_minimum_fare(default_tariff):
    assert compute_price(0, default_tariff) == 100


def test_price_is_monotonic(default_tariff):
    prices = [compute_price(d / 10, default_tariff) for d in range(0, 500)]
    assert prices == sorted(prices)


def test_price_above_floor(default_tariff):
    assert compute_price(10.0, default_tariff) == 400


def test_price_rounds_half_up():
    tariff = Tariff(minimum_fare=0, per_km_rate=1.0)
    assert compute_price(2.5, tariff) == 3
    assert compute_price(2.4, tariff) == 2


def test_price_uses_configured_constants():
    tariff = Tariff(minimum_fare=250, per_km_rate=55.0)
    assert compute_price(1.0, tariff) == 250
    assert compute_price(10.0, tariff) == 550


def test_price_is_always_an_integer(default_tariff):
    for distance in (0.0, 0.3, 2.49, 16.44):
        assert isinstance(compute_price(distance, default_tariff), int)


def test_price_negative_distance_raises(default_tariff):
    with pytest.raises(ValueError):
        compute_price(-1.0, default_tariff)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"minimum_fare": -1},
        {"minimum_fare": 99.5},
        {"minimum_fare": True},
        {"per_km_rate": -0.5},
        {"per_km_rate": float("nan")},
        {"earth_radius_km": 0},
    ],
)
def test_tariff_rejects_invalid_constants(kwargs):
    with pytest.raises(ValueError):
        Tariff(**kwargs)


# ─── Scenarios ───────────────────────────────────────────────────────


def test_short_hop_hits_minimum_fare(oran_center, oran_nearby, default_tariff):
    quote = quote_route(oran_center, oran_nearby, default_tariff)
    assert 0.8 < quote.distance_km < 1.0
    assert quote.price_units == 100


def test_longer_route_is_priced_per_km(oran_center, oran_outskirts, default_tariff):
    quote = quote_route(oran_center, oran_outskirts, default_tariff)
    assert 15.0 < quote.distance_km < 17.5
    assert quote.price_units == math.floor(quote.distance_km * 40 + 0.5)
    assert quote.price_units > 100
