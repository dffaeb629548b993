"""Route endpoints — tariff lookup and stateless price quotes."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from wassali.domain.errors import InvalidCoordinate
from wassali.domain.policies.pricing import quote_route
from wassali.domain.value_objects.geo_point import GeoPoint
from wassali.domain.value_objects.tariff import Tariff
from wassali.infrastructure.api.dependencies import get_tariff

logger = logging.getLogger(__name__)

router = APIRouter(tags=["route"])


class PointPayload(BaseModel):
    latitude: float = Field(ge=-90, le=90, allow_inf_nan=False)
    longitude: float = Field(ge=-180, le=180, allow_inf_nan=False)

    def to_domain(self) -> GeoPoint:
        return GeoPoint(latitude=self.latitude, longitude=self.longitude)


class QuoteRequest(BaseModel):
    pickup: PointPayload
    dropoff: PointPayload


class QuoteResponse(BaseModel):
    pickup: PointPayload
    dropoff: PointPayload
    distance_km: float
    price_units: int


class TariffResponse(BaseModel):
    minimum_fare: int
    per_km_rate: float
    earth_radius_km: float


@router.get("/tariff", response_model=TariffResponse)
async def get_current_tariff(tariff: Tariff = Depends(get_tariff)):
    return TariffResponse(
        minimum_fare=tariff.minimum_fare,
        per_km_rate=tariff.per_km_rate,
        earth_radius_km=tariff.earth_radius_km,
    )


@router.post("/route/quote", response_model=QuoteResponse)
async def quote(body: QuoteRequest, tariff: Tariff = Depends(get_tariff)):
    """Price the route between a pickup and a drop-off point."""
    try:
        result = quote_route(body.pickup.to_domain(), body.dropoff.to_domain(), tariff)
    except InvalidCoordinate as e:
        raise HTTPException(status_code=422, detail=str(e))

    logger.info("Quoted %.3f km → %d", result.distance_km, result.price_units)
    return QuoteResponse(
        pickup=body.pickup,
        dropoff=body.dropoff,
        distance_km=round(result.distance_km, 3),
        price_units=result.price_units,
    )
