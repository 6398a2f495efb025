"""City lookup client for POST /: templated upstream URL, Fahrenheit source."""

import logging
from urllib.parse import quote

import httpx

from weatherproxy.config.schema import ProxyConfig
from weatherproxy.ingest.errors import DataNotFoundError
from weatherproxy.ingest.weather_client import fetch_json
from weatherproxy.models.weather import CityWeather
from weatherproxy.shaping.formatters import convert_temperature, resolve_unit

logger = logging.getLogger(__name__)

CITY_PLACEHOLDER = "<CITY>"
APIKEY_PLACEHOLDER = "<APIKEY>"


class CityWeatherClient:
    def __init__(self, config: ProxyConfig, http: httpx.AsyncClient):
        self.config = config
        self.http = http

    def build_url(self, city: str) -> str:
        template = self.config.upstream.city_url_template
        if not template:
            raise DataNotFoundError("City URL template is not configured")
        return template.replace(CITY_PLACEHOLDER, quote(city)).replace(
            APIKEY_PLACEHOLDER, quote(self.config.upstream.api_key)
        )

    async def get_city_weather(self, city: str, unit: str | None = "C") -> CityWeather:
        """Fetch weather for ``city`` and convert its temperature to ``unit``."""
        if not city or not city.strip():
            raise DataNotFoundError("City name is required")

        raw = await fetch_json(self.http, self.build_url(city))
        main = raw.get("main") if isinstance(raw, dict) else None
        temp = main.get("temp") if isinstance(main, dict) else None
        if not isinstance(temp, int | float) or isinstance(temp, bool):
            raise DataNotFoundError(f"Temperature not found for city {city!r}")

        applied = resolve_unit(unit)
        return CityWeather(
            temp=convert_temperature(temp, applied),
            unit=applied.value,
            city=city,
            full_response=raw,
        )
