"""Application configuration via Pydantic Settings.

NOTE: Every field maps to an explicit .env variable name (MINIMUM_FARE,
PER_KM_RATE, etc.) so a typo in the environment can't silently fall back.
"""

from pydantic import Field
from pydantic_settings import BaseSettings

from wassali.domain.value_objects.geo_point import GeoPoint
from wassali.domain.value_objects.tariff import Tariff


class Settings(BaseSettings):
    # Tariff
    minimum_fare: int = Field(default=100, ge=0, validation_alias="MINIMUM_FARE")
    per_km_rate: float = Field(default=40.0, ge=0, validation_alias="PER_KM_RATE")
    earth_radius_km: float = Field(default=6371.0, gt=0, validation_alias="EARTH_RADIUS_KM")

    # Location
    location_timeout_s: float = Field(default=10.0, gt=0, validation_alias="LOCATION_TIMEOUT_S")
    ip_geolocation_url: str = Field(
        default="https://ipapi.co/json/",
        validation_alias="IP_GEOLOCATION_URL",
    )
    static_latitude: float | None = Field(default=None, validation_alias="STATIC_LATITUDE")
    static_longitude: float | None = Field(default=None, validation_alias="STATIC_LONGITUDE")

    # Geocoder
    geocoder_user_agent: str = Field(
        default="wassali-delivery",
        validation_alias="GEOCODER_USER_AGENT",
    )
    geocoder_country_codes: str = Field(default="dz", validation_alias="GEOCODER_COUNTRY_CODES")

    # App
    debug: bool = Field(default=False, validation_alias="DEBUG")
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://127.0.0.1:3000"],
        validation_alias="CORS_ORIGINS",
    )

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def tariff(self) -> Tariff:
        return Tariff(
            minimum_fare=self.minimum_fare,
            per_km_rate=self.per_km_rate,
            earth_radius_km=self.earth_radius_km,
        )

    def static_location(self) -> GeoPoint | None:
        if self.static_latitude is None or self.static_longitude is None:
            return None
        return GeoPoint(latitude=self.static_latitude, longitude=self.static_longitude)


settings = Settings()
