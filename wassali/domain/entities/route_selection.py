"""RouteSelection and RouteQuote — a pickup/drop-off pair with its derived price."""

from dataclasses import dataclass

from wassali.domain.value_objects.geo_point import GeoPoint


@dataclass(frozen=True)
class RouteSelection:
    """Snapshot of a route being selected.

    distance_km and price_units are zero until both points are present.
    """

    pickup: GeoPoint | None = None
    dropoff: GeoPoint | None = None
    distance_km: float = 0.0
    price_units: int = 0

    @property
    def is_complete(self) -> bool:
        return self.pickup is not None and self.dropoff is not None


@dataclass(frozen=True)
class RouteQuote:
    """Priced route between two known points."""

    pickup: GeoPoint
    dropoff: GeoPoint
    distance_km: float
    price_units: int
