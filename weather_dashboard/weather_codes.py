# ABOUTME: Static WMO weather code table mapping integer codes to display text and icons.
# ABOUTME: Provides a total lookup (falls back to clear sky) and a describe helper (falls back to Unknown).

from weather_dashboard.models import Condition

WEATHER_CODES: dict[int, Condition] = {
    0: Condition(text="Clear sky", icon="☀️"),
    1: Condition(text="Mainly clear", icon="🌤️"),
    2: Condition(text="Partly cloudy", icon="⛅"),
    3: Condition(text="Overcast", icon="☁️"),
    45: Condition(text="Fog", icon="🌫️"),
    48: Condition(text="Depositing rime fog", icon="🌫️"),
    51: Condition(text="Light drizzle", icon="🌧️"),
    53: Condition(text="Moderate drizzle", icon="🌧️"),
    55: Condition(text="Dense drizzle", icon="🌧️"),
    56: Condition(text="Light freezing drizzle", icon="🌧️❄️"),
    57: Condition(text="Dense freezing drizzle", icon="🌧️❄️"),
    61: Condition(text="Slight rain", icon="🌧️"),
    63: Condition(text="Moderate rain", icon="🌧️"),
    65: Condition(text="Heavy rain", icon="🌧️"),
    66: Condition(text="Light freezing rain", icon="🌧️❄️"),
    67: Condition(text="Heavy freezing rain", icon="🌧️❄️"),
    71: Condition(text="Slight snow fall", icon="❄️"),
    73: Condition(text="Moderate snow fall", icon="❄️"),
    75: Condition(text="Heavy snow fall", icon="❄️"),
    77: Condition(text="Snow grains", icon="❄️"),
    80: Condition(text="Slight rain showers", icon="🌦️"),
    81: Condition(text="Moderate rain showers", icon="🌦️"),
    82: Condition(text="Violent rain showers", icon="🌦️"),
    85: Condition(text="Slight snow showers", icon="🌨️"),
    86: Condition(text="Heavy snow showers", icon="🌨️"),
    95: Condition(text="Thunderstorm", icon="⛈️"),
    96: Condition(text="Thunderstorm with slight hail", icon="⛈️"),
    99: Condition(text="Thunderstorm with heavy hail", icon="⛈️"),
}

UNKNOWN_CONDITION = Condition(text="Unknown", icon="❓")


def as_code(value) -> int | None:
    """Coerce a raw payload value to an integer weather code, or None if it isn't one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def lookup(code) -> Condition:
    """Return the condition for a code, falling back to the clear-sky entry."""
    return WEATHER_CODES.get(as_code(code), WEATHER_CODES[0])


def describe(code) -> Condition:
    """Return the condition for a code, or the Unknown placeholder if it isn't in the table."""
    return WEATHER_CODES.get(as_code(code), UNKNOWN_CONDITION)
