"""Wassali — FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wassali.config import settings
from wassali.infrastructure.api.routes_health import router as health_router
from wassali.infrastructure.api.routes_route import router as route_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    tariff = settings.tariff()
    logger.info(
        "Tariff: minimum_fare=%d, per_km_rate=%g, earth_radius_km=%g",
        tariff.minimum_fare, tariff.per_km_rate, tariff.earth_radius_km,
    )
    yield


def create_app() -> FastAPI:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(levelname)s | %(name)s | %(message)s",
    )

    app = FastAPI(
        title="Wassali — delivery route pricing",
        description="Pickup/drop-off distance and fare quotes",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router, prefix="/api")
    app.include_router(route_router, prefix="/api")

    return app


app = create_app()
