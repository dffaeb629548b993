"""Port interface for obtaining the current position of the requester."""

from abc import ABC, abstractmethod

from wassali.domain.value_objects.geo_point import GeoPoint


class LocationProviderPort(ABC):
    @abstractmethod
    async def current_position(self) -> GeoPoint:
        """Return the requester's current position.

        Raises LocationUnavailable if the position is denied or cannot be produced.
        """
        ...
