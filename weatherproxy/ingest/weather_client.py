"""Timelines API client: current conditions and 7-day forecast for one location."""

import logging
from typing import Any

import httpx

from weatherproxy.config.defaults import (
    CURRENT_FIELDS,
    DAILY_TIMESTEP,
    FORECAST_FIELDS,
    SUN_FIELDS,
)
from weatherproxy.config.schema import ProxyConfig
from weatherproxy.ingest.errors import UpstreamHTTPError
from weatherproxy.models.weather import CurrentWeather, ForecastDay
from weatherproxy.shaping import reshape

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "Accept-Encoding": "gzip, deflate",
    "Accept": "application/json",
}


def error_payload(resp: httpx.Response) -> Any:
    """Upstream error body: parsed JSON when possible, else raw text."""
    try:
        return resp.json()
    except ValueError:
        return resp.text


async def fetch_json(
    http: httpx.AsyncClient, url: str, params: dict[str, Any] | None = None
) -> dict:
    """GET ``url`` and decode JSON, mapping transport and status failures
    to UpstreamHTTPError."""
    try:
        resp = await http.get(url, params=params, headers=DEFAULT_HEADERS)
    except httpx.RequestError as e:
        logger.error("Upstream request failed: %s -> %s", url, e)
        raise UpstreamHTTPError(f"Request failed: {e}") from e

    if resp.status_code >= 400:
        details = error_payload(resp)
        raise UpstreamHTTPError(
            f"HTTP {resp.status_code} from upstream", resp.status_code, details
        )
    try:
        return resp.json()
    except ValueError as e:
        raise UpstreamHTTPError(
            "Upstream returned invalid JSON", resp.status_code, resp.text
        ) from e


class WeatherClient:
    """Holds the shared HTTP transport and config; one instance per process."""

    def __init__(self, config: ProxyConfig, http: httpx.AsyncClient):
        self.config = config
        self.http = http

    def _params(self, fields: list[str], **extra: str) -> dict[str, Any]:
        return {
            "location": self.config.location.as_query(),
            "apikey": self.config.upstream.api_key,
            "units": "metric",
            "fields": ",".join(fields),
            **extra,
        }

    async def _get(self, params: dict[str, Any]) -> dict:
        return await fetch_json(self.http, self.config.upstream.base_url, params)

    async def get_current_weather(self) -> CurrentWeather:
        raw = await self._get(self._params(CURRENT_FIELDS))
        sun = None
        fmt = self.config.formatting
        if fmt.include_sun_times:
            daily = await self._get(
                self._params(SUN_FIELDS, timesteps=DAILY_TIMESTEP)
            )
            sun = reshape.extract_first_day_sun(daily, fmt.tz())
        return reshape.extract_current(raw, sun)

    async def get_weather_forecast(self) -> list[ForecastDay]:
        fmt = self.config.formatting
        fields = FORECAST_FIELDS + (SUN_FIELDS if fmt.include_sun_times else [])
        raw = await self._get(
            self._params(
                fields,
                timesteps=DAILY_TIMESTEP,
                startTime="now",
                endTime="nowPlus7d",
            )
        )
        days = reshape.extract_forecast_days(raw, fmt.tz(), fmt.include_sun_times)
        logger.debug("Reshaped %d forecast days", len(days))
        return days
