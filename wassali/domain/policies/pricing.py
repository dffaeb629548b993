"""PricingPolicy — great-circle distance and fare for a delivery route."""

from __future__ import annotations

import math

from wassali.domain.entities.route_selection import RouteQuote
from wassali.domain.errors import MissingPoint
from wassali.domain.value_objects.geo_point import MEAN_EARTH_RADIUS_KM, GeoPoint
from wassali.domain.value_objects.tariff import Tariff


def _round_half_up(value: float) -> int:
    # round() in Python is banker's rounding; fares round .5 up
    return int(math.floor(value + 0.5))


def compute_distance_km(
    a: GeoPoint | None,
    b: GeoPoint | None,
    earth_radius_km: float = MEAN_EARTH_RADIUS_KM,
) -> float:
    """Haversine distance between two points.

    Raises:
        MissingPoint: if either point is absent.
    """
    if a is None or b is None:
        raise MissingPoint("Both pickup and drop-off are required to compute a distance")
    return a.haversine_km(b, earth_radius_km)


def compute_price(distance_km: float, tariff: Tariff) -> int:
    """Pure function: max(minimum_fare, round(distance_km * per_km_rate)).

    Raises:
        ValueError: if distance_km is negative or not finite.
    """
    if not math.isfinite(distance_km) or distance_km < 0:
        raise ValueError(f"distance_km must be a non-negative number, got {distance_km}")
    return max(tariff.minimum_fare, _round_half_up(distance_km * tariff.per_km_rate))


def quote_route(pickup: GeoPoint, dropoff: GeoPoint, tariff: Tariff) -> RouteQuote:
    """Price a route between two known points without any selection state."""
    distance = compute_distance_km(pickup, dropoff, tariff.earth_radius_km)
    return RouteQuote(
        pickup=pickup,
        dropoff=dropoff,
        distance_km=distance,
        price_units=compute_price(distance, tariff),
    )
