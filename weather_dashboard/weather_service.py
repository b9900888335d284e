# ABOUTME: Service layer for Open-Meteo geocoding and forecast API calls.
# ABOUTME: Converts HTTP failures into NotFoundError/TransportError; one attempt per request.

import logging

import httpx
from pydantic import ValidationError

from weather_dashboard.errors import NotFoundError, TransportError
from weather_dashboard.models import Coordinate, GeocodeResult, Location

logger = logging.getLogger(__name__)

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
FORECAST_URL = "https://api.open-meteo.com/v1/forecast"

CURRENT_PARAMS = (
    "temperature_2m,relative_humidity_2m,apparent_temperature,is_day,"
    "precipitation,rain,showers,snowfall,weather_code,cloud_cover,"
    "pressure_msl,surface_pressure,wind_speed_10m,wind_direction_10m,wind_gusts_10m"
)

HOURLY_PARAMS = "temperature_2m,weather_code"

DAILY_PARAMS = (
    "weather_code,temperature_2m_max,temperature_2m_min,sunrise,sunset,"
    "uv_index_max,precipitation_sum,rain_sum,showers_sum,snowfall_sum,"
    "precipitation_hours,precipitation_probability_max,wind_speed_10m_max,"
    "wind_gusts_10m_max,wind_direction_10m_dominant"
)


async def resolve_city(
    client: httpx.AsyncClient, city_name: str, url: str = GEOCODING_URL
) -> GeocodeResult:
    """Geocode a city name to its best-matching coordinate and location metadata.

    Raises:
        ValueError: If the city name is blank; no request is sent.
        NotFoundError: If the geocoder returns no usable match.
        TransportError: On a non-success status or network failure.
    """
    name = city_name.strip()
    if not name:
        raise ValueError("city name must not be empty")

    data = await _get_json(client, url, {"name": name, "count": 1, "language": "en", "format": "json"})

    results = data.get("results")
    if not isinstance(results, list) or not results or not isinstance(results[0], dict):
        raise NotFoundError(name)

    r = results[0]
    if r.get("latitude") is None or r.get("longitude") is None:
        raise NotFoundError(name)

    try:
        return _geocode_result(r, name)
    except ValidationError as e:
        logger.warning("Unusable geocoding match for %r: %s", name, e)
        raise NotFoundError(name) from e


def _geocode_result(r: dict, name: str) -> GeocodeResult:
    return GeocodeResult(
        coordinate=Coordinate(latitude=r["latitude"], longitude=r["longitude"]),
        location=Location(
            name=r.get("name") or name,
            country=r.get("country") or "",
            region=r.get("admin1") or "",
        ),
    )


async def fetch_forecast(
    client: httpx.AsyncClient,
    latitude: float | None,
    longitude: float | None,
    url: str = FORECAST_URL,
) -> dict:
    """Fetch current, hourly and daily forecast sections in a single request.

    Returns the raw JSON payload; shaping it for display is the normalizer's job.
    """
    if latitude is None or longitude is None:
        raise ValueError("latitude and longitude are both required")

    return await _get_json(
        client,
        url,
        {
            "latitude": latitude,
            "longitude": longitude,
            "current": CURRENT_PARAMS,
            "hourly": HOURLY_PARAMS,
            "daily": DAILY_PARAMS,
            "timezone": "auto",
        },
    )


async def _get_json(client: httpx.AsyncClient, url: str, params: dict) -> dict:
    """GET a JSON object, translating every failure mode into TransportError."""
    logger.debug("GET %s params=%s", url, params)
    try:
        resp = await client.get(url, params=params)
        resp.raise_for_status()
        data = resp.json()
    except httpx.HTTPStatusError as e:
        status = e.response.status_code
        logger.warning("HTTP %s from %s", status, url)
        raise TransportError(f"HTTP error! Status: {status}", status_code=status) from e
    except httpx.HTTPError as e:
        logger.warning("Request to %s failed: %s", url, e)
        raise TransportError(f"Request failed: {e}") from e
    except ValueError as e:
        logger.warning("Invalid JSON from %s: %s", url, e)
        raise TransportError(f"Invalid JSON response: {e}") from e

    if not isinstance(data, dict):
        raise TransportError(f"Unexpected response body from {url}")
    return data
