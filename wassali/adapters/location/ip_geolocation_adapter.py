"""IP geolocation adapter — implements LocationProviderPort over HTTP."""

from __future__ import annotations

import logging

import httpx

from wassali.application.ports.location_port import LocationProviderPort
from wassali.config import settings
from wassali.domain.errors import LocationUnavailable
from wassali.domain.value_objects.geo_point import GeoPoint

logger = logging.getLogger(__name__)


class IpGeolocationAdapter(LocationProviderPort):
    """Approximate position of the caller from an IP geolocation JSON service.

    Understands both ``latitude``/``longitude`` (ipapi.co) and ``lat``/``lon``
    (ip-api.com) payloads.
    """

    def __init__(
        self,
        url: str | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._url = url or settings.ip_geolocation_url
        self._timeout = timeout
        self._transport = transport

    async def current_position(self) -> GeoPoint:
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(
                    self._url,
                    headers={"User-Agent": settings.geocoder_user_agent},
                    timeout=self._timeout,
                )
                response.raise_for_status()
                data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("IP geolocation request to %s failed: %s", self._url, e)
            raise LocationUnavailable(f"IP geolocation request failed: {e}") from e

        if not isinstance(data, dict) or data.get("error") or data.get("status") == "fail":
            reason = data.get("reason") or data.get("message") if isinstance(data, dict) else data
            logger.warning("IP geolocation refused: %s", reason)
            raise LocationUnavailable(f"IP geolocation refused: {reason}")

        lat = data.get("latitude", data.get("lat"))
        lon = data.get("longitude", data.get("lon"))
        if lat is None or lon is None:
            raise LocationUnavailable("IP geolocation response has no coordinates")

        try:
            point = GeoPoint(latitude=float(lat), longitude=float(lon))
        except (TypeError, ValueError) as e:
            raise LocationUnavailable(f"IP geolocation returned bad coordinates: {e}") from e

        logger.info("IP geolocation resolved → (%f, %f)", point.latitude, point.longitude)
        return point
