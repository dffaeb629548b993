"""Tests for the HTTP API using FastAPI's TestClient."""

import pytest
from fastapi.testclient import TestClient

from wassali.domain.value_objects.tariff import Tariff
from wassali.infrastructure.api.dependencies import get_tariff
from wassali.main import create_app


@pytest.fixture
def client():
    app = create_app()
    app.dependency_overrides[get_tariff] = lambda: Tariff(minimum_fare=100, per_km_rate=40.0)
    return TestClient(app)


def _point(lat, lon):
    return {"latitude": lat, "longitude": lon}


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_tariff(client):
    data = client.get("/api/tariff").json()
    assert data == {"minimum_fare": 100, "per_km_rate": 40.0, "earth_radius_km": 6371.0}


def test_quote_short_route_minimum_fare(client):
    response = client.post(
        "/api/route/quote",
        json={"pickup": _point(35.6971, -0.6308), "dropoff": _point(35.7000, -0.6400)},
    )
    assert response.status_code == 200
    data = response.json()
    assert 0.8 < data["distance_km"] < 1.0
    assert data["price_units"] == 100
    assert data["pickup"] == _point(35.6971, -0.6308)


def test_quote_longer_route(client):
    data = client.post(
        "/api/route/quote",
        json={"pickup": _point(35.6971, -0.6308), "dropoff": _point(35.8000, -0.5000)},
    ).json()
    assert 15.0 < data["distance_km"] < 17.5
    assert data["price_units"] > 600


def test_quote_uses_overridden_tariff():
    app = create_app()
    app.dependency_overrides[get_tariff] = lambda: Tariff(minimum_fare=500, per_km_rate=10.0)
    data = TestClient(app).post(
        "/api/route/quote",
        json={"pickup": _point(35.6971, -0.6308), "dropoff": _point(35.8000, -0.5000)},
    ).json()
    assert data["price_units"] == 500


@pytest.mark.parametrize(
    "pickup",
    [_point(91.0, 0.0), _point(0.0, -181.0)],
)
def test_quote_rejects_out_of_range(client, pickup):
    response = client.post(
        "/api/route/quote",
        json={"pickup": pickup, "dropoff": _point(35.7, -0.64)},
    )
    assert response.status_code == 422


def test_quote_requires_both_points(client):
    response = client.post("/api/route/quote", json={"pickup": _point(35.7, -0.64)})
    assert response.status_code == 422
