# ABOUTME: Transforms a raw Open-Meteo forecast payload into the dashboard's view model.
# ABOUTME: Pure and total: missing or malformed fields degrade to defaults instead of raising.

import math
from datetime import datetime

from weather_dashboard.models import CurrentConditions, DailyPoint, HourlyPoint, Location, ViewModel
from weather_dashboard.weather_codes import as_code, describe, lookup

HOURS_PER_DAY = 24
DEFAULT_SUNRISE = "06:00"
DEFAULT_SUNSET = "18:00"


def normalize(raw: dict, now: datetime, location: Location | None = None) -> ViewModel:
    """Build a ViewModel from a forecast payload.

    ``now`` fixes the start of the hourly window, so identical inputs always
    yield identical view models.
    """
    raw = _section(raw)
    hourly = _section(raw, "hourly")
    daily = _section(raw, "daily")

    return ViewModel(
        location=location,
        current=parse_current(raw.get("current"), daily),
        hourly=parse_hourly(hourly, now),
        daily=parse_daily(daily),
    )


def parse_current(current, daily: dict) -> CurrentConditions | None:
    """Normalize the current-conditions section; UV is borrowed from the first daily entry."""
    if not isinstance(current, dict):
        return None

    code = as_code(current.get("weather_code")) or 0
    humidity = _number(current.get("relative_humidity_2m"))
    return CurrentConditions(
        temperature_celsius=_number(current.get("temperature_2m")),
        condition=lookup(code),
        weather_code=code,
        wind_speed_kph=_number(current.get("wind_speed_10m")),
        humidity_percent=round(humidity) if humidity is not None else None,
        pressure_mb=_number(current.get("pressure_msl")),
        uv_index=_number(_get_at(daily, "uv_index_max", 0)) or 0.0,
        is_daytime=current.get("is_day") == 1,
    )


def parse_hourly(raw: dict, now: datetime) -> list[HourlyPoint]:
    """Build exactly 24 hourly points starting at the current hour.

    Hour indexes wrap modulo 24 but every timestamp keeps ``now``'s calendar
    date, so hours past midnight are stamped with today's date.
    """
    result = []
    for i in range(HOURS_PER_DAY):
        hour = (now.hour + i) % HOURS_PER_DAY
        stamp = now.replace(hour=hour, minute=0, second=0, microsecond=0)
        result.append(
            HourlyPoint(
                timestamp_iso=stamp.isoformat(),
                temperature_celsius=_number(_get_at(raw, "temperature_2m", hour)),
                condition=describe(_get_at(raw, "weather_code", hour)),
            )
        )
    return result


def parse_daily(raw: dict) -> list[DailyPoint]:
    """Zip Open-Meteo daily columns into one DailyPoint per date."""
    dates = raw.get("time")
    if not isinstance(dates, list):
        return []

    result = []
    for i, d in enumerate(dates):
        high = _number(_get_at(raw, "temperature_2m_max", i))
        low = _number(_get_at(raw, "temperature_2m_min", i))
        result.append(
            DailyPoint(
                date=d if isinstance(d, str) else "",
                average_temperature_celsius=(high + low) / 2 if high is not None and low is not None else None,
                condition=describe(_get_at(raw, "weather_code", i)),
                sunrise=_time_of_day(_get_at(raw, "sunrise", i)) or DEFAULT_SUNRISE,
                sunset=_time_of_day(_get_at(raw, "sunset", i)) or DEFAULT_SUNSET,
            )
        )
    return result


def _section(data, key: str | None = None) -> dict:
    if key is not None:
        data = data.get(key) if isinstance(data, dict) else None
    return data if isinstance(data, dict) else {}


def _get_at(data: dict, key: str, index: int):
    """Safely get value at index from a column array, returning None if missing."""
    col = data.get(key)
    if not isinstance(col, list) or index >= len(col):
        return None
    return col[index]


def _number(value) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        number = float(value)
    except OverflowError:
        return None
    # JSON decoders accept NaN and Infinity literals.
    return number if math.isfinite(number) else None


def _time_of_day(value) -> str | None:
    # "2025-01-15T08:45" -> "08:45"
    if not isinstance(value, str) or "T" not in value:
        return None
    return value.split("T", 1)[1] or None
