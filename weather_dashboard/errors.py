# ABOUTME: Error taxonomy for the geocoding and forecast calls.
# ABOUTME: Service functions raise these; the dashboard catches them at the call site.


class WeatherError(Exception):
    """Base class for failures reported by the weather service layer."""


class NotFoundError(WeatherError):
    """Geocoding returned no usable match for a city name."""

    def __init__(self, city_name: str):
        super().__init__(f"City not found: {city_name}")
        self.city_name = city_name


class TransportError(WeatherError):
    """An external call failed with a non-success status or a network error."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
