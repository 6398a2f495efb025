"""Default upstream endpoint, location and server settings."""

DEFAULT_BASE_URL = "https://api.tomorrow.io/v4/weather/forecast"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 4000

# Fixed location served by GET /
DEFAULT_LAT = "21.422510"
DEFAULT_LON = "39.826168"

CURRENT_FIELDS: list[str] = [
    "temperature",
    "windSpeed",
    "humidity",
    "precipitationProbability",
]
FORECAST_FIELDS: list[str] = ["temperature", "weatherCode"]
SUN_FIELDS: list[str] = ["sunriseTime", "sunsetTime"]
DAILY_TIMESTEP = "1d"

# Environment variable -> dotted config key
ENV_OVERRIDES: dict[str, str] = {
    "BASE_URL": "upstream.base_url",
    "TOMORROW_API_KEY": "upstream.api_key",
    "WEATHER_URL_TEMPLATE": "upstream.city_url_template",
    "UPSTREAM_TIMEOUT": "upstream.timeout_seconds",
    "LOCATION_LAT": "location.lat",
    "LOCATION_LON": "location.lon",
    "WEATHERPROXY_HOST": "server.host",
    "PORT": "server.port",
    "WEATHER_TIMEZONE": "formatting.timezone",
    "INCLUDE_SUN_TIMES": "formatting.include_sun_times",
}
