"""Pydantic v2 configuration schema with strict validation."""

from datetime import UTC, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator

from weatherproxy.config.defaults import (
    DEFAULT_BASE_URL,
    DEFAULT_HOST,
    DEFAULT_LAT,
    DEFAULT_LON,
    DEFAULT_PORT,
)


class UpstreamConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    base_url: str = DEFAULT_BASE_URL
    api_key: str = ""
    timeout_seconds: float = Field(default=30.0, gt=0.0)
    # e.g. https://api.example.com/weather?q=<CITY>&appid=<APIKEY>&units=imperial
    city_url_template: str = ""


class LocationConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    lat: str = DEFAULT_LAT
    lon: str = DEFAULT_LON

    @field_validator("lat", "lon")
    @classmethod
    def _numeric(cls, v: str) -> str:
        float(v)
        return v

    def as_query(self) -> str:
        return f"{self.lat},{self.lon}"


class ServerConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    host: str = DEFAULT_HOST
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)


class FormattingConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    timezone: str = "UTC"
    include_sun_times: bool = False

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, v: str) -> str:
        if v != "UTC":
            try:
                ZoneInfo(v)
            except (ZoneInfoNotFoundError, ValueError) as e:
                raise ValueError(f"Unknown timezone: {v}") from e
        return v

    def tz(self) -> tzinfo:
        return UTC if self.timezone == "UTC" else ZoneInfo(self.timezone)


class ProxyConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    upstream: UpstreamConfig = UpstreamConfig()
    location: LocationConfig = LocationConfig()
    server: ServerConfig = ServerConfig()
    formatting: FormattingConfig = FormattingConfig()
