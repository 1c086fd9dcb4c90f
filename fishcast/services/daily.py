"""Per-day wind and wave averages over the hourly series."""

from typing import Sequence

from fishcast.models.marine_schemas import DayAggregate
from fishcast.models.schemas import TimeSeries, TimeValue

HOURS_PER_DAY = 24


def mean_of(values: Sequence[float | None] | None) -> float | None:
    """Arithmetic mean of the non-null samples, or None if there are none."""
    if not values:
        return None
    valid = [v for v in values if v is not None]
    if not valid:
        return None
    return sum(valid) / len(valid)


def day_window(
    values: Sequence[float | None] | None,
    day: int,
) -> Sequence[float | None]:
    """Slice the fixed 24-hour window for a day index."""
    if values is None:
        return []
    start = day * HOURS_PER_DAY
    return values[start:start + HOURS_PER_DAY]


def aggregate_day(hourly: TimeSeries, day: int, date: TimeValue = None) -> DayAggregate:
    """Average wind and waves for one day.

    Directions are averaged as plain numbers, not on the circle, so
    samples either side of north (e.g. 350 and 10) average to south.
    """
    return DayAggregate(
        date=date,
        avg_wind_speed=mean_of(day_window(hourly.wind_speed, day)),
        avg_wind_direction=mean_of(day_window(hourly.wind_direction, day)),
        avg_wave_height=mean_of(day_window(hourly.wave_height, day)),
        avg_wave_direction=mean_of(day_window(hourly.wave_direction, day)),
    )


def aggregate_days(
    hourly: TimeSeries,
    days: Sequence[TimeValue] | int,
) -> list[DayAggregate]:
    """
    Aggregate each requested day of the hourly series.

    Day d covers hourly entries [24d, 24d + 24). The hourly axis is
    assumed to start at local midnight; no calendar correction is made.

    Args:
        hourly: Hourly time series.
        days: Daily time axis, or a number of days.

    Returns:
        One DayAggregate per day, in order.
    """
    if isinstance(days, int):
        dates: Sequence[TimeValue] = [None] * max(days, 0)
    else:
        dates = days

    return [aggregate_day(hourly, day, date) for day, date in enumerate(dates)]
