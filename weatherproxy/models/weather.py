"""Reshaped weather payloads returned by GET / and POST /."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class SunTimes:
    sunrise: str | None
    sunset: str | None


@dataclass(frozen=True)
class CurrentWeather:
    temperature: float | None
    wind_speed: str  # km/h, one decimal
    humidity: str
    rain_chance: str
    sun: SunTimes | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "temperature": self.temperature,
            "windSpeed": self.wind_speed,
            "humidity": self.humidity,
            "rainChance": self.rain_chance,
        }
        if self.sun is not None:
            out["sunrise"] = self.sun.sunrise
            out["sunset"] = self.sun.sunset
        return out


@dataclass(frozen=True)
class TemperatureRange:
    avg: float | None
    max: float | None
    min: float | None


@dataclass(frozen=True)
class ForecastDay:
    day_name: str
    date: str  # M/D/YYYY
    temperature: TemperatureRange
    weather_code: int | None
    sun: SunTimes | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "dayName": self.day_name,
            "date": self.date,
            "temperature": {
                "avg": self.temperature.avg,
                "max": self.temperature.max,
                "min": self.temperature.min,
            },
            "weatherCode": self.weather_code,
        }
        if self.sun is not None:
            out["sunrise"] = self.sun.sunrise
            out["sunset"] = self.sun.sunset
        return out


@dataclass(frozen=True)
class CityWeather:
    temp: str
    unit: str
    city: str
    full_response: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "temp": self.temp,
            "unit": self.unit,
            "city": self.city,
            "fullResponse": self.full_response,
        }
