"""Fixed-position adapter — implements LocationProviderPort for kiosks and pinned setups."""

from wassali.application.ports.location_port import LocationProviderPort
from wassali.domain.errors import LocationUnavailable
from wassali.domain.value_objects.geo_point import GeoPoint


class StaticLocationAdapter(LocationProviderPort):
    def __init__(self, point: GeoPoint | None):
        self._point = point

    async def current_position(self) -> GeoPoint:
        if self._point is None:
            raise LocationUnavailable("No static location configured")
        return self._point
