"""Map raw timelines responses onto CurrentWeather / ForecastDay models."""

import logging
from datetime import UTC, tzinfo
from typing import Any

from weatherproxy.ingest.errors import DataNotFoundError
from weatherproxy.models.weather import CurrentWeather, ForecastDay, SunTimes, TemperatureRange
from weatherproxy.shaping import formatters

logger = logging.getLogger(__name__)


def _timeline(raw: dict, name: str) -> list[dict]:
    timelines = raw.get("timelines") if isinstance(raw, dict) else None
    if not isinstance(timelines, dict) or not isinstance(timelines.get(name), list):
        raise DataNotFoundError(f"{name.capitalize()} timeline not found in response")
    return timelines[name]


def _first_values(raw: dict, name: str) -> dict | None:
    entries = _timeline(raw, name)
    if not entries or not isinstance(entries[0], dict):
        return None
    values = entries[0].get("values")
    return values if isinstance(values, dict) and values else None


def extract_sun_times(values: dict[str, Any], tz: tzinfo = UTC) -> SunTimes:
    return SunTimes(
        sunrise=formatters.format_time(values.get("sunriseTime"), tz),
        sunset=formatters.format_time(values.get("sunsetTime"), tz),
    )


def extract_current(raw: dict, sun: SunTimes | None = None) -> CurrentWeather:
    """Reshape the first minutely bucket into CurrentWeather."""
    try:
        values = _first_values(raw, "minutely")
    except DataNotFoundError:
        values = None
    if values is None:
        raise DataNotFoundError("Current weather data not found in response")

    speed = values.get("windSpeed")
    return CurrentWeather(
        temperature=values.get("temperature"),
        wind_speed=formatters.wind_speed(speed if speed is not None else 0),
        humidity=formatters.percentage(values.get("humidity")),
        rain_chance=formatters.percentage(values.get("precipitationProbability")),
        sun=sun,
    )


def extract_first_day_sun(raw: dict, tz: tzinfo = UTC) -> SunTimes:
    """Sunrise/sunset of the first daily bucket; nulls when missing."""
    try:
        values = _first_values(raw, "daily")
    except DataNotFoundError:
        logger.warning("No daily timeline for sun times")
        values = None
    return extract_sun_times(values or {}, tz)


def extract_forecast_days(
    raw: dict, tz: tzinfo = UTC, include_sun_times: bool = False
) -> list[ForecastDay]:
    """One ForecastDay per daily bucket, in upstream order."""
    return [
        _forecast_day(day, tz, include_sun_times)
        for day in _timeline(raw, "daily")
    ]


def _forecast_day(day: dict, tz: tzinfo, include_sun_times: bool) -> ForecastDay:
    time = day.get("time")
    try:
        when = formatters.parse_timestamp(time).astimezone(tz)
    except (TypeError, ValueError, AttributeError) as e:
        raise DataNotFoundError(f"Invalid forecast time: {time!r}") from e

    values = day.get("values") or {}
    return ForecastDay(
        day_name=formatters.day_name(when),
        date=formatters.locale_date(when),
        temperature=TemperatureRange(
            avg=values.get("temperatureAvg"),
            max=values.get("temperatureMax"),
            min=values.get("temperatureMin"),
        ),
        weather_code=values.get("weatherCodeMax"),
        sun=extract_sun_times(values, tz) if include_sun_times else None,
    )
