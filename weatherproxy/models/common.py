"""Common types shared across models."""

from enum import StrEnum


class TemperatureUnit(StrEnum):
    CELSIUS = "C"
    KELVIN = "K"
    FAHRENHEIT = "F"
