"""Port interface for the address search box of a delivery request.

A customer who can't or won't share their position types the pickup or
drop-off address instead; the selector treats the resolved point exactly like
a map click.
"""

from abc import ABC, abstractmethod

from wassali.domain.value_objects.geo_point import GeoPoint


class GeocoderPort(ABC):
    @abstractmethod
    async def geocode(self, address: str) -> GeoPoint | None:
        """Resolve a free-text street address to the point a courier should go to.

        Returns None when nothing matches, leaving the route untouched. May
        raise on transport failures; the selector swallows those as well.
        """
        ...
