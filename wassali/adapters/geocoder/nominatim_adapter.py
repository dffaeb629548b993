"""Nominatim geocoder adapter — implements GeocoderPort."""

from __future__ import annotations

import logging

import httpx

from wassali.application.ports.geocoder_port import GeocoderPort
from wassali.config import settings
from wassali.domain.value_objects.geo_point import GeoPoint

logger = logging.getLogger(__name__)

NOMINATIM_URL = "https://nominatim.openstreetmap.org/search"


class NominatimAdapter(GeocoderPort):
    """Nominatim geocoding with an in-memory cache."""

    def __init__(
        self,
        user_agent: str | None = None,
        country_codes: str | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._user_agent = user_agent or settings.geocoder_user_agent
        self._country_codes = country_codes if country_codes is not None else settings.geocoder_country_codes
        self._timeout = timeout
        self._transport = transport
        self._cache: dict[str, GeoPoint | None] = {}

    async def geocode(self, address: str) -> GeoPoint | None:
        """Geocode an address string to GeoPoint.

        Failed HTTP lookups are not cached so a later retry can still succeed.
        """
        cache_key = address.strip().lower()
        if not cache_key:
            return None

        if cache_key in self._cache:
            logger.debug("Cache hit for '%s'", address)
            return self._cache[cache_key]

        params = {"q": address.strip(), "format": "json", "limit": 1}
        if self._country_codes:
            params["countrycodes"] = self._country_codes

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(
                    NOMINATIM_URL,
                    params=params,
                    headers={"User-Agent": self._user_agent},
                    timeout=self._timeout,
                )
                response.raise_for_status()
                results = response.json()
        except (httpx.HTTPError, ValueError):
            logger.exception("Nominatim API error for '%s'", address)
            return None

        point = None
        if results:
            try:
                point = GeoPoint(latitude=float(results[0]["lat"]), longitude=float(results[0]["lon"]))
                logger.info("Nominatim resolved '%s' → (%f, %f)", address, point.latitude, point.longitude)
            except (KeyError, TypeError, ValueError):
                logger.warning("Nominatim returned an unusable result for '%s': %r", address, results[0])
        else:
            logger.info("Nominatim returned no results for '%s'", address)

        self._cache[cache_key] = point
        return point
