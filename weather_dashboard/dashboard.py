# ABOUTME: Dashboard controller driving the geocode -> forecast -> normalize pipeline.
# ABOUTME: Every user action replaces the AppState snapshot; results of superseded searches are dropped.

import logging
from collections.abc import Callable
from datetime import datetime

from weather_dashboard.deps import DashboardDeps
from weather_dashboard.errors import NotFoundError, TransportError
from weather_dashboard.i18n import SUPPORTED_LANGUAGES, translate
from weather_dashboard.models import AppState, Coordinate, Location
from weather_dashboard.normalizer import normalize
from weather_dashboard.weather_service import fetch_forecast, resolve_city

logger = logging.getLogger(__name__)


class Dashboard:
    """Application state holder for the weather dashboard.

    ``state`` is never mutated in place; each transition builds a new AppState
    and hands it to ``listener`` (if any) so a renderer can redraw.

    Each load takes a generation number. A response that comes back after a
    newer load has started is discarded, so a slow earlier search cannot
    overwrite a later one.
    """

    def __init__(
        self,
        deps: DashboardDeps,
        clock: Callable[[], datetime] = datetime.now,
        listener: Callable[[AppState], None] | None = None,
    ):
        self.deps = deps
        self._clock = clock
        self._listener = listener
        self._generation = 0

        settings = deps.settings
        self.state = AppState(
            language=settings.language,
            city_input=settings.default_city,
            search_term=settings.default_city,
            coordinate=Coordinate(latitude=settings.default_latitude, longitude=settings.default_longitude),
        )

    async def __aenter__(self) -> "Dashboard":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client held by the dependencies."""
        await self.deps.http_client.aclose()

    def set_city_input(self, text: str) -> AppState:
        return self._replace(city_input=text)

    def toggle_theme(self) -> AppState:
        return self._replace(theme="light" if self.state.theme == "dark" else "dark")

    def set_language(self, language: str) -> AppState:
        if language not in SUPPORTED_LANGUAGES:
            raise ValueError(f"Unsupported language: {language}")
        return self._replace(language=language)

    async def start(self) -> AppState:
        """Load the default city."""
        return await self.load_city(self.state.search_term)

    async def submit_search(self) -> AppState:
        """Commit the input box as the search term and load it if it changed."""
        term = self.state.city_input.strip()
        if not term or term == self.state.search_term:
            return self.state
        return await self.load_city(term)

    async def load_city(self, term: str) -> AppState:
        """Resolve a city, publish its location, then fetch and normalize its forecast."""
        term = term.strip()
        if not term:
            return self.state

        generation = self._next_generation()
        self._replace(search_term=term, loading=True, error=None)

        settings = self.deps.settings
        try:
            found = await resolve_city(self.deps.http_client, term, url=settings.geocoding_url)
        except NotFoundError as e:
            logger.warning("Failed to fetch coordinates: %s", e)
            return self._fail(generation, "city_not_found")
        except TransportError as e:
            logger.warning("Failed to fetch coordinates for %r: %s", term, e)
            return self._fail(generation, "error_fetching")

        if self._is_stale(generation, term):
            return self.state

        # The location renders before the forecast arrives.
        self._replace(
            coordinate=found.coordinate,
            view_model=self.state.view_model.model_copy(update={"location": found.location}),
        )
        return await self._load_forecast(generation, found.coordinate, found.location)

    async def load_forecast(self, coordinate: Coordinate) -> AppState:
        """Fetch and normalize the forecast for a coordinate, keeping the current location."""
        generation = self._next_generation()
        self._replace(coordinate=coordinate, loading=True, error=None)
        return await self._load_forecast(generation, coordinate, self.state.view_model.location)

    async def _load_forecast(self, generation: int, coordinate: Coordinate, location: Location | None) -> AppState:
        settings = self.deps.settings
        try:
            raw = await fetch_forecast(
                self.deps.http_client, coordinate.latitude, coordinate.longitude, url=settings.forecast_url
            )
        except TransportError as e:
            logger.warning("Failed to fetch weather data: %s", e)
            return self._fail(generation, "error_fetching")

        if self._is_stale(generation, coordinate):
            return self.state

        view_model = normalize(raw, self._clock(), location=location)
        return self._replace(view_model=view_model, loading=False)

    def _next_generation(self) -> int:
        self._generation += 1
        return self._generation

    def _is_stale(self, generation: int, what) -> bool:
        if generation == self._generation:
            return False
        logger.debug("Dropping superseded result for %r (generation %d < %d)", what, generation, self._generation)
        return True

    def _fail(self, generation: int, message_key: str) -> AppState:
        if self._is_stale(generation, message_key):
            return self.state
        return self._replace(loading=False, error=translate(message_key, self.state.language))

    def _replace(self, **changes) -> AppState:
        self.state = self.state.model_copy(update=changes)
        if self._listener is not None:
            self._listener(self.state)
        return self.state
