# ABOUTME: Pydantic BaseModels for geocoding results, the normalized view model and app state.
# ABOUTME: All models are frozen; updates produce new instances via model_copy.

from typing import Literal

from pydantic import BaseModel, ConfigDict

Theme = Literal["dark", "light"]
Language = Literal["en", "ru", "uz"]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class Coordinate(_Frozen):
    """Latitude/longitude pair resolved by the geocoder."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    latitude: float
    longitude: float


class Location(_Frozen):
    """Display metadata for a resolved place."""

    name: str
    country: str = ""
    region: str = ""


class Condition(_Frozen):
    """Human-readable weather condition with an icon glyph."""

    text: str
    icon: str


class GeocodeResult(_Frozen):
    """Best geocoding match: where the place is and what to call it."""

    coordinate: Coordinate
    location: Location


class CurrentConditions(_Frozen):
    """Current weather snapshot, normalized for display."""

    temperature_celsius: float | None = None
    condition: Condition
    weather_code: int = 0
    wind_speed_kph: float | None = None
    humidity_percent: int | None = None
    pressure_mb: float | None = None
    uv_index: float = 0.0
    is_daytime: bool = False


class HourlyPoint(_Frozen):
    """One entry of the 24-hour forecast strip."""

    timestamp_iso: str
    temperature_celsius: float | None = None
    condition: Condition


class DailyPoint(_Frozen):
    """One day of the multi-day forecast."""

    date: str
    average_temperature_celsius: float | None = None
    condition: Condition
    sunrise: str = "06:00"
    sunset: str = "18:00"


class ViewModel(_Frozen):
    """UI-ready weather data for one location.

    A view model may carry a location before its forecast has arrived; renderers
    should check ``is_ready`` before drawing the weather panels.
    """

    location: Location | None = None
    current: CurrentConditions | None = None
    hourly: list[HourlyPoint] = []
    daily: list[DailyPoint] = []

    @property
    def is_ready(self) -> bool:
        return self.location is not None and self.current is not None


class AppState(_Frozen):
    """Snapshot of everything the dashboard renders."""

    theme: Theme = "dark"
    language: Language = "en"
    city_input: str = ""
    search_term: str = ""
    coordinate: Coordinate | None = None
    view_model: ViewModel = ViewModel()
    loading: bool = False
    error: str | None = None
