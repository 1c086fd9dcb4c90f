"""Pytest configuration and fixtures for marine conditions tests."""

from datetime import datetime, timezone
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from fishcast.main import app
from fishcast.models.schemas import CurrentSnapshot, ForecastInput, TimeSeries
from fishcast.routes.conditions import limiter
from fishcast.services.openmeteo import clear_forecast_cache

HOURS = 48


@pytest.fixture(autouse=True)
def reset_state() -> Generator[None, None, None]:
    """Start every test with an empty payload cache and fresh rate limits."""
    clear_forecast_cache()
    limiter.reset()
    yield
    clear_forecast_cache()


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Create test client for FastAPI app."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def fixed_now() -> datetime:
    """An instant 20 minutes past hour 10 of the sample series."""
    return datetime(2024, 6, 1, 10, 20, tzinfo=timezone.utc)


def _hour_times() -> list[str]:
    return [f"2024-06-{1 + h // 24:02d}T{h % 24:02d}:00" for h in range(HOURS)]


def _with_window(base: float, window: list) -> list:
    """Series of ``base`` with hours 10-15 replaced by ``window``."""
    values: list = [base] * HOURS
    values[10:16] = window
    return values


@pytest.fixture
def sample_hourly() -> TimeSeries:
    """Two days of calm hourly conditions with a small rain window at hour 10."""
    return TimeSeries(
        time=_hour_times(),
        temperature=[18.0 + (h % 24) * 0.5 for h in range(HOURS)],
        wind_speed=[10.0] * HOURS,
        wind_direction=[90.0] * HOURS,
        wave_height=[0.25] * HOURS,
        wave_direction=[180.0] * HOURS,
        swell_wave_height=[0.5] * HOURS,
        swell_wave_direction=[200.0] * HOURS,
        swell_wave_period=[12.0] * HOURS,
        precipitation=_with_window(0.0, [1.0, None, 0.5, 0.0, 0.0, 0.2]),
        precipitation_probability=_with_window(0.0, [20.0, 40.0, None, 10.0, 0.0, 5.0]),
        visibility=[10000.0] * HOURS,
        weather_code=[3] * HOURS,
    )


@pytest.fixture
def sample_daily() -> TimeSeries:
    """Daily axis matching the two sample days."""
    return TimeSeries(
        time=["2024-06-01", "2024-06-02"],
        weather_code=[3, 61],
        temperature_max=[22.0, 20.0],
        temperature_min=[14.0, 13.0],
        uv_index_max=[5.5, 8.2],
    )


@pytest.fixture
def sample_forecast(sample_hourly: TimeSeries, sample_daily: TimeSeries) -> ForecastInput:
    """Forecast input without a current snapshot."""
    return ForecastInput(hourly=sample_hourly, daily=sample_daily)


@pytest.fixture
def sample_snapshot() -> CurrentSnapshot:
    """Current snapshot that disagrees with the hourly series."""
    return CurrentSnapshot(
        time="2024-06-01T10:15",
        temperature=21.5,
        wind_speed=0.0,
        wind_direction=270.0,
        wind_gusts=18.0,
        wave_height=1.5,
        wave_direction=None,
        swell_wave_period=7.0,
        weather_code=61,
    )


@pytest.fixture
def sample_open_meteo_weather() -> dict:
    """Sample Open-Meteo forecast response."""
    return {
        "latitude": -33.86,
        "longitude": 151.2,
        "utc_offset_seconds": 36000,
        "timezone": "Australia/Sydney",
        "current": {
            "time": "2024-06-01T10:15",
            "temperature_2m": 16.2,
            "precipitation": 0.0,
            "weather_code": 2,
            "wind_speed_10m": 12.0,
            "wind_direction_10m": 225.0,
            "wind_gusts_10m": 24.5,
        },
        "hourly": {
            "time": _hour_times(),
            "temperature_2m": [15.0] * HOURS,
            "wind_speed_10m": [12.0] * HOURS,
            "wind_direction_10m": [225.0] * HOURS,
            "weather_code": [2] * HOURS,
            "precipitation": [0.0] * HOURS,
            "precipitation_probability": [10] * HOURS,
            "visibility": [24000.0] * HOURS,
        },
        "daily": {
            "time": ["2024-06-01", "2024-06-02"],
            "weather_code": [2, 3],
            "temperature_2m_max": [18.0, 17.0],
            "temperature_2m_min": [10.0, 9.0],
            "uv_index_max": [3.1, 2.4],
        },
    }


@pytest.fixture
def sample_open_meteo_marine() -> dict:
    """Sample Open-Meteo marine response."""
    return {
        "latitude": -33.86,
        "longitude": 151.2,
        "current": {
            "time": "2024-06-01T10:00",
            "wave_height": 0.6,
            "wave_direction": 140.0,
            "swell_wave_height": 0.4,
            "swell_wave_direction": 150.0,
            "swell_wave_period": 9.0,
        },
        "hourly": {
            "time": _hour_times(),
            "wave_height": [0.8] * HOURS,
            "wave_direction": [140.0] * HOURS,
            "swell_wave_height": [0.5] * HOURS,
            "swell_wave_direction": [150.0] * HOURS,
            "swell_wave_period": [9.0] * HOURS,
        },
    }
