"""Weather proxy HTTP surface: FastAPI app factory and routes."""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from weatherproxy.config.schema import ProxyConfig
from weatherproxy.ingest.city_client import CityWeatherClient
from weatherproxy.ingest.errors import WeatherClientError
from weatherproxy.ingest.weather_client import WeatherClient

logger = logging.getLogger(__name__)

FETCH_FAILED = "Failed to fetch weather data"
INVALID_CITY = "Provide a valide city name"


class CityQuery(BaseModel):
    city: str = ""
    unit: str | None = "C"


def error_details(exc: Exception):
    if isinstance(exc, WeatherClientError):
        return exc.details
    return str(exc)


def create_app(config: ProxyConfig, http_client: httpx.AsyncClient | None = None) -> FastAPI:
    """Build the app. ``http_client`` is owned by the caller when given."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        http = http_client or httpx.AsyncClient(timeout=config.upstream.timeout_seconds)
        app.state.weather = WeatherClient(config, http)
        app.state.cities = CityWeatherClient(config, http)
        try:
            yield
        finally:
            if http_client is None:
                await http.aclose()

    app = FastAPI(title="Weather Proxy", version="0.1.0", lifespan=lifespan)
    app.state.config = config

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.get("/")
    async def get_weather(request: Request):
        """Current conditions plus the daily forecast for the configured location."""
        weather: WeatherClient = request.app.state.weather
        try:
            current, daily = await asyncio.gather(
                weather.get_current_weather(),
                weather.get_weather_forecast(),
            )
        except Exception as e:
            details = error_details(e)
            logger.error("Weather API error: %s", details)
            return JSONResponse(
                status_code=500,
                content={"error": FETCH_FAILED, "details": details},
            )

        return {
            "location": {"lat": config.location.lat, "lon": config.location.lon},
            "current": current.to_dict(),
            "dailyTemperatures": [day.to_dict() for day in daily],
        }

    @app.post("/")
    async def post_city_weather(request: Request):
        """Temperature for a named city, converted to the requested unit.

        Malformed bodies get the same 500 response as unknown cities.
        """
        cities: CityWeatherClient = request.app.state.cities
        try:
            query = CityQuery.model_validate(await request.json())
            result = await cities.get_city_weather(query.city, query.unit)
        except Exception as e:
            logger.error("City weather error: %s", error_details(e))
            return JSONResponse(status_code=500, content={"msg": INVALID_CITY})
        return result.to_dict()

    return app
