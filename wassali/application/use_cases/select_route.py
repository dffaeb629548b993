"""RouteSelector — two-phase pickup/drop-off selection with a derived price."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable

from wassali.application.ports.geocoder_port import GeocoderPort
from wassali.application.ports.location_port import LocationProviderPort
from wassali.domain.entities.route_selection import RouteSelection
from wassali.domain.errors import LocationUnavailable
from wassali.domain.policies.pricing import compute_distance_km, compute_price
from wassali.domain.value_objects.enums import SelectionState, Slot
from wassali.domain.value_objects.geo_point import GeoPoint
from wassali.domain.value_objects.tariff import Tariff

logger = logging.getLogger(__name__)

DEFAULT_LOCATION_TIMEOUT_S = 10.0

_ACTIVE_SLOT: dict[SelectionState, Slot | None] = {
    SelectionState.AWAITING_PICKUP: Slot.PICKUP,
    SelectionState.AWAITING_DROPOFF: Slot.DROPOFF,
    SelectionState.ROUTE_READY: None,
}


class RouteSelector:
    """Turns two user-supplied points into a priced route.

    State machine:
      AWAITING_PICKUP --point--> AWAITING_DROPOFF --point--> ROUTE_READY
    ROUTE_READY is terminal until reset(). Writes to a slot that is not the
    active one are rejected without touching state.

    Asynchronous lookups (device position, address search) capture a
    generation token and the active slot when they start. reset() bumps the
    token, so results arriving after it are dropped.
    """

    def __init__(
        self,
        tariff: Tariff | None = None,
        location_provider: LocationProviderPort | None = None,
        geocoder: GeocoderPort | None = None,
        location_timeout_s: float = DEFAULT_LOCATION_TIMEOUT_S,
    ):
        self._tariff = tariff or Tariff()
        self._location = location_provider
        self._geocoder = geocoder
        self._timeout = location_timeout_s
        self._generation = 0
        self._pickup: GeoPoint | None = None
        self._dropoff: GeoPoint | None = None
        self._state = SelectionState.AWAITING_PICKUP

    # ─── Read side ──────────────────────────────────────────────────

    @property
    def tariff(self) -> Tariff:
        return self._tariff

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def active_slot(self) -> Slot | None:
        return _ACTIVE_SLOT[self._state]

    @property
    def is_ready(self) -> bool:
        return self._state == SelectionState.ROUTE_READY

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def selection(self) -> RouteSelection:
        """Current snapshot; distance and price are zero until the route is ready."""
        if self._pickup is None or self._dropoff is None:
            return RouteSelection(pickup=self._pickup, dropoff=self._dropoff)

        distance = self.compute_distance_km(self._pickup, self._dropoff)
        return RouteSelection(
            pickup=self._pickup,
            dropoff=self._dropoff,
            distance_km=distance,
            price_units=self.compute_price(distance),
        )

    def compute_distance_km(self, a: GeoPoint | None, b: GeoPoint | None) -> float:
        return compute_distance_km(a, b, self._tariff.earth_radius_km)

    def compute_price(self, distance_km: float) -> int:
        return compute_price(distance_km, self._tariff)

    # ─── Write side ─────────────────────────────────────────────────

    def select_point(self, point: GeoPoint, slot: Slot | None = None) -> bool:
        """Record a point into the active slot.

        Args:
            point: the selected location.
            slot: the slot the caller means to fill; None means "the active one".

        Returns:
            True if the point was recorded, False if the write was out of turn.
        """
        active = self.active_slot
        if active is None:
            logger.info("Route already selected, ignoring point %s until reset", point)
            return False
        if slot is not None and Slot(slot) != active:
            logger.info("Rejected %s point: %s is expected", Slot(slot).value, active.value)
            return False

        if active == Slot.PICKUP:
            self._pickup = point
            self._state = SelectionState.AWAITING_DROPOFF
        else:
            self._dropoff = point
            self._state = SelectionState.ROUTE_READY
            route = self.selection
            logger.info(
                "Route ready: %s → %s (%.2f km, price=%d)",
                route.pickup, route.dropoff, route.distance_km, route.price_units,
            )
        return True

    def select_coordinates(self, latitude: float, longitude: float, slot: Slot | None = None) -> bool:
        """Map-click entry point; raises InvalidCoordinate before touching state."""
        return self.select_point(GeoPoint(latitude=latitude, longitude=longitude), slot)

    def reset(self) -> None:
        """Clear both points and return to AWAITING_PICKUP, dropping pending lookups."""
        self._generation += 1
        self._pickup = None
        self._dropoff = None
        self._state = SelectionState.AWAITING_PICKUP

    async def use_current_location(self) -> bool:
        """Fill the active slot with the device position.

        Denial, failure and timeout leave the state unchanged and return False.
        """
        if self._location is None:
            logger.warning("No location provider configured")
            return False
        return await self._select_from(self._location.current_position(), "current location")

    async def select_address(self, address: str) -> bool:
        """Fill the active slot with a geocoded address; unresolved addresses are a no-op."""
        if self._geocoder is None:
            logger.warning("No geocoder configured, cannot resolve '%s'", address)
            return False
        return await self._select_from(self._geocoder.geocode(address), f"address '{address}'")

    async def _select_from(self, lookup: Awaitable[GeoPoint | None], source: str) -> bool:
        slot = self.active_slot
        if slot is None:
            # Don't leave the coroutine un-awaited
            if asyncio.iscoroutine(lookup):
                lookup.close()
            logger.info("Route already selected, ignoring %s", source)
            return False

        generation = self._generation
        try:
            point = await asyncio.wait_for(lookup, timeout=self._timeout)
        except asyncio.TimeoutError:
            logger.info("Lookup of %s timed out after %.1fs", source, self._timeout)
            return False
        except LocationUnavailable as e:
            logger.info("Lookup of %s failed: %s", source, e)
            return False
        except Exception:
            logger.exception("Lookup of %s raised, keeping current route", source)
            return False

        if point is None:
            logger.info("Lookup of %s returned no position", source)
            return False
        if generation != self._generation:
            logger.info("Discarding stale %s result after reset", source)
            return False
        return self.select_point(point, slot)
