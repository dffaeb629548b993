"""Tariff value object — the pricing constants of a delivery."""

import math
from dataclasses import dataclass

from wassali.domain.value_objects.geo_point import MEAN_EARTH_RADIUS_KM


@dataclass(frozen=True)
class Tariff:
    """Prices are in the smallest display unit of the local currency."""

    minimum_fare: int = 100
    per_km_rate: float = 40.0
    earth_radius_km: float = MEAN_EARTH_RADIUS_KM

    def __post_init__(self):
        if isinstance(self.minimum_fare, bool) or not isinstance(self.minimum_fare, int):
            raise ValueError(f"minimum_fare must be an integer, got {self.minimum_fare!r}")
        if self.minimum_fare < 0:
            raise ValueError(f"minimum_fare must be >= 0, got {self.minimum_fare}")
        if not math.isfinite(self.per_km_rate) or self.per_km_rate < 0:
            raise ValueError(f"per_km_rate must be >= 0, got {self.per_km_rate}")
        if not math.isfinite(self.earth_radius_km) or self.earth_radius_km <= 0:
            raise ValueError(f"earth_radius_km must be > 0, got {self.earth_radius_km}")
