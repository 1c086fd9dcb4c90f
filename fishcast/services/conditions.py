"""Marine report pipeline: alignment, extraction, scoring and aggregation."""

import logging
from datetime import datetime, timedelta, timezone, tzinfo

from fishcast.config import get_settings
from fishcast.models.marine_schemas import MarineReport
from fishcast.models.schemas import ForecastInput
from fishcast.services.alignment import Clock, align_index
from fishcast.services.daily import aggregate_days
from fishcast.services.extractor import extract_current
from fishcast.services.precipitation import forecast_precipitation
from fishcast.services.scoring import score_fishing_conditions

logger = logging.getLogger(__name__)


def feed_timezone(forecast: ForecastInput) -> tzinfo:
    """Return the fixed-offset timezone of the feed's local timestamps."""
    if not forecast.utc_offset_seconds:
        return timezone.utc
    return timezone(timedelta(seconds=forecast.utc_offset_seconds))


def build_marine_report(
    forecast: ForecastInput,
    now: datetime | float | None = None,
    clock: Clock | None = None,
    tz: tzinfo | None = None,
) -> MarineReport:
    """
    Derive current conditions, rain outlook and daily averages.

    Every call recomputes from the input alone; the same input and
    instant always give the same report.

    Args:
        forecast: Feed data for one refresh.
        now: Instant to align to; read from ``clock`` when omitted.
        clock: Clock used when ``now`` is omitted.
        tz: Timezone for naive timestamps (defaults to the feed offset).

    Returns:
        MarineReport for the aligned hour.
    """
    hourly = forecast.hourly
    tz = tz or feed_timezone(forecast)

    index = align_index(hourly.time, now=now, clock=clock, tz=tz)

    conditions = extract_current(hourly, index, forecast.current)
    conditions.fishing_rating = score_fishing_conditions(
        conditions.wave_height,
        conditions.wind_speed,
        conditions.swell_wave_period,
    )

    precipitation = forecast_precipitation(
        hourly.precipitation_probability,
        hourly.precipitation,
        start=index,
    )

    if forecast.daily is not None and forecast.daily.time:
        days = aggregate_days(hourly, forecast.daily.time)
    else:
        days = aggregate_days(hourly, get_settings().daily_fallback_days)

    logger.debug(
        f"Marine report at index {index}: rating={conditions.fishing_rating.value}, "
        f"rain={precipitation.chance}%, days={len(days)}"
    )

    return MarineReport(
        aligned_index=index,
        conditions=conditions,
        precipitation=precipitation,
        days=days,
    )
