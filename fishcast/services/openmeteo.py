"""Open-Meteo forecast and marine feed integration."""

import asyncio
import logging
from datetime import datetime, timedelta, timezone
from typing import Any

import httpx
from cachetools import TTLCache

from fishcast.config import get_settings
from fishcast.models.marine_schemas import MarineReportResponse
from fishcast.models.schemas import CurrentSnapshot, ForecastInput, TimeSeries
from fishcast.services.alignment import Clock, SystemClock
from fishcast.services.conditions import build_marine_report

logger = logging.getLogger(__name__)

# Open-Meteo key -> TimeSeries / CurrentSnapshot field
HOURLY_FIELDS: dict[str, str] = {
    "temperature_2m": "temperature",
    "wind_speed_10m": "wind_speed",
    "wind_direction_10m": "wind_direction",
    "wave_height": "wave_height",
    "wave_direction": "wave_direction",
    "swell_wave_height": "swell_wave_height",
    "swell_wave_direction": "swell_wave_direction",
    "swell_wave_period": "swell_wave_period",
    "precipitation": "precipitation",
    "precipitation_probability": "precipitation_probability",
    "visibility": "visibility",
    "weather_code": "weather_code",
}

DAILY_FIELDS: dict[str, str] = {
    "weather_code": "weather_code",
    "temperature_2m_max": "temperature_max",
    "temperature_2m_min": "temperature_min",
    "uv_index_max": "uv_index_max",
}

CURRENT_FIELDS: dict[str, str] = {
    "temperature_2m": "temperature",
    "wind_speed_10m": "wind_speed",
    "wind_direction_10m": "wind_direction",
    "wind_gusts_10m": "wind_gusts",
    "wave_height": "wave_height",
    "wave_direction": "wave_direction",
    "swell_wave_height": "swell_wave_height",
    "swell_wave_direction": "swell_wave_direction",
    "swell_wave_period": "swell_wave_period",
    "weather_code": "weather_code",
    "precipitation": "precipitation",
}

MARINE_KEYS: list[str] = [
    "wave_height",
    "wave_direction",
    "swell_wave_height",
    "swell_wave_direction",
    "swell_wave_period",
]

WEATHER_HOURLY_KEYS: list[str] = [
    "temperature_2m",
    "wind_speed_10m",
    "wind_direction_10m",
    "weather_code",
    "precipitation",
    "precipitation_probability",
    "visibility",
]

WEATHER_CURRENT_KEYS: list[str] = [
    "temperature_2m",
    "precipitation",
    "weather_code",
    "wind_speed_10m",
    "wind_direction_10m",
    "wind_gusts_10m",
]

WEATHER_DAILY_KEYS: list[str] = [
    "weather_code",
    "temperature_2m_max",
    "temperature_2m_min",
    "uv_index_max",
]

_settings = get_settings()

# Cache merged payloads; reports are rebuilt from them on every call
forecast_cache: TTLCache = TTLCache(
    maxsize=_settings.forecast_cache_size,
    ttl=_settings.forecast_cache_ttl,
)

# Singleton HTTP client (initialized lazily)
_http_client: httpx.AsyncClient | None = None


async def get_http_client() -> httpx.AsyncClient:
    """Get or create the singleton HTTP client."""
    global _http_client
    if _http_client is None:
        _http_client = httpx.AsyncClient(timeout=get_settings().http_timeout)
    return _http_client


async def close_http_client() -> None:
    """Close the HTTP client (call on app shutdown)."""
    global _http_client
    if _http_client is not None:
        await _http_client.aclose()
        _http_client = None


def clear_forecast_cache() -> None:
    """Drop all cached payloads."""
    forecast_cache.clear()


async def fetch_forecast_payload(latitude: float, longitude: float) -> dict | None:
    """
    Fetch the weather and marine feeds and merge them.

    The two requests run concurrently. A failed marine request is logged
    and the weather payload is returned without marine arrays; a failed
    weather request returns None or raises the httpx error.

    Args:
        latitude: Latitude coordinate.
        longitude: Longitude coordinate.

    Returns:
        Merged Open-Meteo payload, or None if the weather feed refused.
    """
    cache_key = f"openmeteo:{latitude:.3f},{longitude:.3f}"
    if cache_key in forecast_cache:
        return forecast_cache[cache_key]

    settings = get_settings()
    client = await get_http_client()

    weather_params = {
        "latitude": latitude,
        "longitude": longitude,
        "hourly": ",".join(WEATHER_HOURLY_KEYS),
        "daily": ",".join(WEATHER_DAILY_KEYS),
        "current": ",".join(WEATHER_CURRENT_KEYS),
        **settings.forecast_params_extra,
    }
    marine_params = {
        "latitude": latitude,
        "longitude": longitude,
        "hourly": ",".join(MARINE_KEYS),
        "current": ",".join(MARINE_KEYS),
        "timezone": settings.open_meteo_timezone,
    }

    weather_resp, marine_resp = await asyncio.gather(
        client.get(settings.open_meteo_forecast_url, params=weather_params),
        client.get(settings.open_meteo_marine_url, params=marine_params),
        return_exceptions=True,
    )

    if isinstance(weather_resp, BaseException):
        raise weather_resp
    if weather_resp.status_code != 200:
        logger.error(f"Weather API error: {weather_resp.status_code}")
        return None

    marine_json: dict = {}
    if isinstance(marine_resp, BaseException):
        logger.warning(f"Marine API request failed: {marine_resp}")
    elif marine_resp.status_code != 200:
        logger.warning(f"Marine API error: {marine_resp.status_code}")
    else:
        marine_json = marine_resp.json()

    payload = merge_payloads(weather_resp.json(), marine_json)
    forecast_cache[cache_key] = payload
    return payload


def merge_payloads(weather_json: dict, marine_json: dict) -> dict:
    """
    Overlay marine hourly and current values on the weather payload.

    Both feeds are requested with the same timezone, so the marine hourly
    arrays share the weather time axis. Marine current values are only
    merged when the weather feed has a current block.
    """
    merged = dict(weather_json)
    marine_hourly = marine_json.get("hourly") or {}
    marine_current = marine_json.get("current")

    hourly = dict(weather_json.get("hourly") or {})
    for key in MARINE_KEYS:
        hourly[key] = marine_hourly.get(key)
    merged["hourly"] = hourly

    if weather_json.get("current") and marine_current:
        current = dict(weather_json["current"])
        for key in MARINE_KEYS:
            current[key] = marine_current.get(key)
        merged["current"] = current

    return merged


def _parse_series(block: dict | None, fields: dict[str, str]) -> TimeSeries:
    block = block or {}
    values: dict[str, Any] = {"time": block.get("time") or []}
    for key, field in fields.items():
        values[field] = block.get(key)
    # Older responses use "weathercode"
    if values.get("weather_code") is None and "weathercode" in block:
        values["weather_code"] = block.get("weathercode")
    return TimeSeries(**values)


def parse_forecast_input(payload: dict) -> ForecastInput:
    """
    Convert an Open-Meteo payload into engine input.

    Args:
        payload: Merged forecast/marine payload.

    Returns:
        ForecastInput with hourly, daily and current data.
    """
    current_block = payload.get("current")
    current = None
    if current_block:
        current_values: dict[str, Any] = {"time": current_block.get("time")}
        for key, field in CURRENT_FIELDS.items():
            current_values[field] = current_block.get(key)
        if current_values.get("weather_code") is None:
            current_values["weather_code"] = current_block.get("weathercode")
        current = CurrentSnapshot(**current_values)

    daily_block = payload.get("daily")
    return ForecastInput(
        utc_offset_seconds=payload.get("utc_offset_seconds") or 0,
        hourly=_parse_series(payload.get("hourly"), HOURLY_FIELDS),
        daily=_parse_series(daily_block, DAILY_FIELDS) if daily_block else None,
        current=current,
    )


def empty_forecast_payload(
    now: datetime,
    hours: int = 24,
    days: int = 7,
) -> dict:
    """
    Build an all-null payload with populated time axes.

    Used when the feed is unavailable so the report still has one
    placeholder entry per hour and day.
    """
    start = now.replace(minute=0, second=0, microsecond=0)
    hourly_times = [
        (start + timedelta(hours=h)).strftime("%Y-%m-%dT%H:%M") for h in range(hours)
    ]
    daily_times = [(now + timedelta(days=d)).date().isoformat() for d in range(days)]

    hourly: dict[str, Any] = {"time": hourly_times}
    for key in WEATHER_HOURLY_KEYS + MARINE_KEYS:
        hourly[key] = [None] * hours

    daily: dict[str, Any] = {"time": daily_times}
    for key in WEATHER_DAILY_KEYS:
        daily[key] = [None] * days

    current: dict[str, Any] = {"time": start.strftime("%Y-%m-%dT%H:%M")}
    for key in WEATHER_CURRENT_KEYS + MARINE_KEYS:
        current[key] = None

    offset = now.utcoffset()
    return {
        "utc_offset_seconds": int(offset.total_seconds()) if offset else 0,
        "hourly": hourly,
        "daily": daily,
        "current": current,
    }


def _placeholder_response(now: datetime, message: str) -> MarineReportResponse:
    forecast = parse_forecast_input(empty_forecast_payload(now))
    return MarineReportResponse(
        success=False,
        data=build_marine_report(forecast, now=now),
        error_message=message,
    )


async def get_marine_report(
    latitude: float,
    longitude: float,
    clock: Clock | None = None,
) -> MarineReportResponse:
    """
    Fetch feed data for a location and build its marine report.

    On failure the response carries a placeholder report (all values
    None, rating Unknown) alongside the error message.

    Args:
        latitude: Latitude coordinate.
        longitude: Longitude coordinate.
        clock: Clock for alignment (defaults to wall clock).

    Returns:
        MarineReportResponse with report data or error.
    """
    now = (clock or SystemClock()).now()

    try:
        payload = await fetch_forecast_payload(latitude, longitude)
    except httpx.TimeoutException:
        logger.error("Weather service timeout")
        return _placeholder_response(
            now, "The weather service is taking too long to respond. Please try again."
        )
    except httpx.RequestError as e:
        logger.error(f"Weather request error: {e}")
        return _placeholder_response(
            now, "I couldn't connect to the weather service. Please try again later."
        )

    if payload is None:
        return _placeholder_response(
            now, "Unable to fetch weather data right now. Please try again."
        )

    forecast = parse_forecast_input(payload)
    return MarineReportResponse(
        success=True,
        data=build_marine_report(forecast, now=now),
    )
