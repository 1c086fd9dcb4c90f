"""Human-readable labels for marine conditions."""

import math

from fishcast.models.marine_schemas import (
    ConditionsSummary,
    DaySummary,
    DerivedConditions,
    MarineReport,
)
from fishcast.models.schemas import TimeSeries
from fishcast.services.extractor import value_at

COMPASS_POINTS: list[str] = ["N", "NE", "E", "SE", "S", "SW", "W", "NW"]

# WMO weather codes grouped into display names: (min_code, max_code, name).
# Codes 0-2 are merged into "Clear sky".
WEATHER_CODE_NAMES: list[tuple[int, int, str]] = [
    (0, 2, "Clear sky"),
    (3, 3, "Overcast"),
    (45, 49, "Fog"),
    (51, 55, "Drizzle"),
    (56, 57, "Freezing Drizzle"),
    (61, 65, "Rain"),
    (66, 67, "Freezing Rain"),
    (71, 77, "Snow"),
    (80, 82, "Rain showers"),
    (85, 86, "Snow showers"),
    (95, 99, "Thunderstorm"),
]

# Wave advice: (max_m exclusive, sentence)
WAVE_ADVICE: list[tuple[float, str]] = [
    (0.5, "Calm seas with minimal waves. Excellent for small vessels."),
    (1.0, "Light chop with small waves. Good for most boats."),
    (2.0, "Moderate waves. Use caution with smaller vessels."),
    (3.0, "Rough seas with significant waves. Small craft advisory."),
    (float("inf"), "Dangerous wave conditions. Consider postponing trip."),
]

# Wind advice: (max_kmh exclusive, sentence)
WIND_ADVICE: list[tuple[float, str]] = [
    (10.0, "Light winds favorable for fishing."),
    (20.0, "Moderate winds may affect casting and boat positioning."),
    (30.0, "Strong winds will make fishing challenging."),
    (float("inf"), "High winds create unsafe boating conditions."),
]

# UV index bands: (min_index, level), highest first
UV_LEVELS: list[tuple[float, str]] = [
    (11.0, "Extreme"),
    (8.0, "Very High"),
    (6.0, "High"),
    (3.0, "Moderate"),
]


def compass_direction(degrees: float | None) -> str | None:
    """
    Convert degrees to an 8-point compass direction.

    Halves round up, so 22.5 is NE and 337.5 wraps to N.
    """
    if degrees is None:
        return None
    index = math.floor(degrees / 45 + 0.5) % 8
    return COMPASS_POINTS[index]


def weather_condition_name(weather_code: int | None) -> str:
    """Return the display name for a WMO weather code."""
    if weather_code is None:
        return "Unknown"
    for low, high, name in WEATHER_CODE_NAMES:
        if low <= weather_code <= high:
            return name
    return f"Unknown ({weather_code})"


def marine_advice(conditions: DerivedConditions | None) -> str:
    """Return boating advice for the current wave height and wind."""
    if conditions is None or (
        conditions.wave_height is None and conditions.wind_speed is None
    ):
        return "Marine data not available"

    advice: list[str] = []
    if conditions.wave_height is not None:
        advice.append(_advice_for(conditions.wave_height, WAVE_ADVICE))
    if conditions.wind_speed is not None:
        advice.append(_advice_for(conditions.wind_speed, WIND_ADVICE))
    return " ".join(advice)


def _advice_for(value: float, table: list[tuple[float, str]]) -> str:
    for limit, text in table:
        if value < limit:
            return text
    return table[-1][1]


def uv_level(uv_index: float | None) -> str:
    """Classify a UV index into a level."""
    if uv_index is None:
        return "Unknown"
    for minimum, level in UV_LEVELS:
        if uv_index >= minimum:
            return level
    return "Low"


def summarize_report(
    report: MarineReport,
    daily: TimeSeries | None = None,
) -> ConditionsSummary:
    """
    Turn a marine report into display labels.

    Args:
        report: Report from build_marine_report.
        daily: Daily series for condition, temperature and UV columns.

    Returns:
        ConditionsSummary for the rendering layer.
    """
    conditions = report.conditions
    days: list[DaySummary] = []
    for index, day in enumerate(report.days):
        uv_index = value_at(daily.uv_index_max, index) if daily else None
        days.append(
            DaySummary(
                date=day.date,
                wind_speed=day.avg_wind_speed,
                wind_compass=compass_direction(day.avg_wind_direction),
                wave_height=day.avg_wave_height,
                wave_compass=compass_direction(day.avg_wave_direction),
                condition=weather_condition_name(
                    value_at(daily.weather_code, index) if daily else None
                ),
                temperature_max=value_at(daily.temperature_max, index) if daily else None,
                temperature_min=value_at(daily.temperature_min, index) if daily else None,
                uv_index=uv_index,
                uv_level=uv_level(uv_index),
            )
        )

    return ConditionsSummary(
        fishing_rating=conditions.fishing_rating,
        condition=weather_condition_name(conditions.weather_code),
        wind_compass=compass_direction(conditions.wind_direction),
        wave_compass=compass_direction(conditions.wave_direction),
        swell_compass=compass_direction(conditions.swell_wave_direction),
        advice=marine_advice(conditions),
        rain_chance=report.precipitation.chance,
        rain_amount=report.precipitation.amount,
        days=days,
    )
