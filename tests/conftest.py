# ABOUTME: Shared test fixtures for the weather dashboard test suite.
# ABOUTME: Isolates tests from WEATHER_* settings and provides realistic Open-Meteo payloads.

import os

import pytest


@pytest.fixture(autouse=True)
def _clean_weather_env(monkeypatch, tmp_path):
    """Keep WEATHER_* variables and any local .env file out of the tests."""
    for var in list(os.environ):
        if var.startswith("WEATHER_"):
            monkeypatch.delenv(var)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def geocode_payload() -> dict:
    return {
        "results": [
            {
                "latitude": 41.26465,
                "longitude": 69.21627,
                "name": "Tashkent",
                "country": "Uzbekistan",
                "admin1": "Tashkent",
                "timezone": "Asia/Tashkent",
            }
        ]
    }


@pytest.fixture
def forecast_payload() -> dict:
    """Two days of forecast; hourly temperature equals hour index + 0.5."""
    return {
        "latitude": 41.25,
        "longitude": 69.25,
        "timezone": "Asia/Tashkent",
        "current": {
            "time": "2025-01-15T10:00",
            "temperature_2m": 22.5,
            "relative_humidity_2m": 41,
            "is_day": 1,
            "weather_code": 0,
            "pressure_msl": 1018.4,
            "wind_speed_10m": 7.9,
        },
        "hourly": {
            "time": [f"2025-01-{15 + h // 24}T{h % 24:02d}:00" for h in range(48)],
            "temperature_2m": [h + 0.5 for h in range(48)],
            "weather_code": [0] * 6 + [3] * 6 + [61] * 6 + [95] * 6 + [0] * 24,
        },
        "daily": {
            "time": ["2025-01-15", "2025-01-16"],
            "weather_code": [3, 71],
            "temperature_2m_max": [8.0, 2.0],
            "temperature_2m_min": [-2.0, -5.0],
            "sunrise": ["2025-01-15T07:58", "2025-01-16T07:57"],
            "sunset": ["2025-01-15T17:31", "2025-01-16T17:32"],
            "uv_index_max": [2.35, 1.9],
        },
    }
