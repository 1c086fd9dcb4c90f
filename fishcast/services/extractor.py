"""Current conditions extraction from the aligned hourly index."""

from typing import Any, Sequence

from fishcast.models.marine_schemas import DerivedConditions
from fishcast.models.schemas import CurrentSnapshot, TimeSeries

# Fields read from the snapshot first, then the hourly series
SNAPSHOT_FIELDS: tuple[str, ...] = (
    "temperature",
    "wind_speed",
    "wind_direction",
    "wave_height",
    "wave_direction",
    "swell_wave_height",
    "swell_wave_direction",
    "swell_wave_period",
    "weather_code",
)


def value_at(values: Sequence[Any] | None, index: int) -> Any:
    """Return values[index], or None when the array is absent or short."""
    if values is None or index < 0 or index >= len(values):
        return None
    return values[index]


def extract_current(
    series: TimeSeries,
    index: int,
    current: CurrentSnapshot | None = None,
) -> DerivedConditions:
    """
    Build the current-conditions snapshot at an aligned index.

    A snapshot value wins whenever it is not None, so a genuine 0 reading
    is kept. Wind gusts only come from the snapshot. The fishing rating is
    left Unknown for the scorer to fill in.

    Args:
        series: Hourly time series.
        index: Aligned hourly index.
        current: Optional feed-supplied snapshot.

    Returns:
        DerivedConditions without a rating.
    """
    values: dict[str, Any] = {}
    for field in SNAPSHOT_FIELDS:
        snapshot_value = getattr(current, field) if current is not None else None
        if snapshot_value is not None:
            values[field] = snapshot_value
        else:
            values[field] = value_at(getattr(series, field), index)

    values["wind_gusts"] = current.wind_gusts if current is not None else None
    return DerivedConditions(**values)
