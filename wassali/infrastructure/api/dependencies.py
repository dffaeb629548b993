"""FastAPI dependency injection — wires settings and adapters into the route selector."""

from __future__ import annotations

import logging

from wassali.adapters.geocoder.nominatim_adapter import NominatimAdapter
from wassali.adapters.location.ip_geolocation_adapter import IpGeolocationAdapter
from wassali.adapters.location.static_adapter import StaticLocationAdapter
from wassali.application.ports.location_port import LocationProviderPort
from wassali.application.use_cases.select_route import RouteSelector
from wassali.config import Settings, settings
from wassali.domain.value_objects.tariff import Tariff

logger = logging.getLogger(__name__)


def get_tariff() -> Tariff:
    return settings.tariff()


def build_location_provider(cfg: Settings = settings) -> LocationProviderPort:
    static_point = cfg.static_location()
    if static_point is not None:
        logger.info("Using static location %s", static_point)
        return StaticLocationAdapter(static_point)
    return IpGeolocationAdapter(url=cfg.ip_geolocation_url, timeout=cfg.location_timeout_s)


def build_route_selector(cfg: Settings = settings) -> RouteSelector:
    """Entry point for front-end layers: one fresh selector per delivery request.

    The HTTP API only exposes stateless quotes; UI layers that drive the
    pickup/drop-off flow call this to get a selector wired to the configured
    tariff, position provider and address search.
    """
    return RouteSelector(
        tariff=cfg.tariff(),
        location_provider=build_location_provider(cfg),
        geocoder=NominatimAdapter(
            user_agent=cfg.geocoder_user_agent,
            country_codes=cfg.geocoder_country_codes,
            timeout=cfg.location_timeout_s,
        ),
        location_timeout_s=cfg.location_timeout_s,
    )
