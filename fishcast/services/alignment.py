"""Alignment of hourly forecast arrays to the current instant."""

import math
from datetime import datetime, timezone, tzinfo
from typing import Protocol, Sequence

from fishcast.models.schemas import TimeValue


class Clock(Protocol):
    """Protocol for sources of the current instant."""

    def now(self) -> datetime:
        """Return the current instant."""
        ...


class SystemClock:
    """Wall clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """Clock pinned to one instant."""

    def __init__(self, instant: datetime) -> None:
        self._instant = instant

    def now(self) -> datetime:
        return self._instant


def _datetime_seconds(value: datetime, tz: tzinfo) -> float:
    if value.tzinfo is None:
        value = value.replace(tzinfo=tz)
    return value.timestamp()


def to_epoch_seconds(
    value: TimeValue | datetime,
    tz: tzinfo = timezone.utc,
) -> float:
    """
    Normalize a time axis entry onto epoch seconds.

    Numbers are taken as epoch seconds. Strings are ISO 8601 dates or
    date-times; naive ones are read in ``tz``. Anything that cannot be
    placed on the scale becomes NaN.

    Args:
        value: Time axis entry.
        tz: Timezone for naive timestamps.

    Returns:
        Epoch seconds, or NaN.
    """
    if value is None or isinstance(value, bool):
        return math.nan
    if isinstance(value, (int, float)):
        try:
            seconds = float(value)
        except OverflowError:
            return math.nan
        return seconds if math.isfinite(seconds) else math.nan
    if isinstance(value, datetime):
        return _datetime_seconds(value, tz)
    if isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            return _datetime_seconds(datetime.fromisoformat(text), tz)
        except (ValueError, OverflowError):
            return math.nan
    return math.nan


def resolve_now(
    now: datetime | float | None = None,
    clock: Clock | None = None,
    tz: tzinfo = timezone.utc,
) -> float:
    """Return the target instant as epoch seconds."""
    if now is None:
        now = (clock or SystemClock()).now()
    return to_epoch_seconds(now, tz)


def align_index(
    times: Sequence[TimeValue] | None,
    now: datetime | float | None = None,
    clock: Clock | None = None,
    tz: tzinfo = timezone.utc,
) -> int:
    """
    Find the index of the time entry closest to now.

    Ties go to the lowest index. Entries that cannot be parsed are
    treated as infinitely far away, so an empty or fully unparseable
    axis yields 0.

    Args:
        times: Time axis (epoch seconds or ISO strings).
        now: Target instant; read from ``clock`` when omitted.
        clock: Clock used when ``now`` is omitted (defaults to wall clock).
        tz: Timezone for naive timestamps.

    Returns:
        Index into the time axis.
    """
    if not times:
        return 0

    target = resolve_now(now, clock, tz)
    closest_index = 0
    smallest_diff = math.inf

    for index, value in enumerate(times):
        diff = abs(to_epoch_seconds(value, tz) - target)
        # NaN never compares smaller
        if diff < smallest_diff:
            smallest_diff = diff
            closest_index = index

    return closest_index
