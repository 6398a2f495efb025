"""Unit conversions and display formatting for reshaped weather payloads."""

import logging
import math
import re
from datetime import UTC, datetime, tzinfo
from decimal import ROUND_HALF_UP, Decimal

from weatherproxy.models.common import TemperatureUnit

logger = logging.getLogger(__name__)

_LEADING_FLOAT = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")

WEEKDAYS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


def _fixed1(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    # Ties round away from zero; -0.0 prints as 0.0
    rounded = Decimal(value or 0.0).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return str(rounded)


def parse_float(value: object) -> float:
    """Lenient numeric parse: numbers pass through, strings use their numeric prefix.

    Anything without a numeric prefix becomes NaN.
    """
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        m = _LEADING_FLOAT.match(value)
        if m:
            return float(m.group(0))
    return math.nan


def wind_speed(speed_ms: object) -> str:
    """m/s to km/h, one decimal. Numeric strings are accepted."""
    return _fixed1(parse_float(speed_ms) * 3.6)


def percentage(value: object) -> str:
    return _fixed1(parse_float(value))


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 upstream timestamp. Naive values are taken as UTC."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    dt = datetime.fromisoformat(value)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt


def format_time(value: object, tz: tzinfo = UTC) -> str | None:
    """Render a timestamp as 12-hour local time, e.g. "6:15 AM".

    Returns None for anything that does not parse.
    """
    if not isinstance(value, str):
        return None
    try:
        local = parse_timestamp(value).astimezone(tz)
    except (ValueError, OverflowError):
        logger.debug("Unparseable timestamp %r", value)
        return None
    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    return f"{hour}:{local.minute:02d} {meridiem}"


def day_name(dt: datetime) -> str:
    return WEEKDAYS[dt.weekday()]


def locale_date(dt: datetime) -> str:
    """en-US short date without zero padding, e.g. 6/3/2024."""
    return f"{dt.month}/{dt.day}/{dt.year}"


def convert_temperature(temp_f: float, unit: str) -> str:
    """Convert a Fahrenheit reading to the requested unit, one decimal.

    Kelvin adds 273.15 to the Fahrenheit value directly; unknown units
    fall back to Fahrenheit.
    """
    if unit == TemperatureUnit.CELSIUS:
        return _fixed1((temp_f - 32) * 5 / 9)
    if unit == TemperatureUnit.KELVIN:
        return _fixed1(temp_f + 273.15)
    return _fixed1(temp_f)


def resolve_unit(unit: str | None) -> TemperatureUnit:
    """Map a requested unit to the one convert_temperature actually applies."""
    try:
        return TemperatureUnit("C" if unit is None else unit)
    except ValueError:
        return TemperatureUnit.FAHRENHEIT
