"""Pydantic models for forecast input data."""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# Epoch seconds or an ISO 8601 calendar timestamp
TimeValue = Union[int, float, str, None]


class TimeSeries(BaseModel):
    """Parallel forecast arrays indexed by a shared time axis.

    Hourly and daily series share this shape; daily-only arrays
    (uv_index_max, temperature_max, temperature_min) stay None on an
    hourly series. An absent array (None) is distinct from an empty one.
    """

    model_config = ConfigDict(frozen=True)

    time: list[TimeValue] = Field(default_factory=list)
    temperature: Optional[list[Optional[float]]] = None
    wind_speed: Optional[list[Optional[float]]] = None
    wind_direction: Optional[list[Optional[float]]] = None
    wave_height: Optional[list[Optional[float]]] = None
    wave_direction: Optional[list[Optional[float]]] = None
    swell_wave_height: Optional[list[Optional[float]]] = None
    swell_wave_direction: Optional[list[Optional[float]]] = None
    swell_wave_period: Optional[list[Optional[float]]] = None
    precipitation: Optional[list[Optional[float]]] = None
    precipitation_probability: Optional[list[Optional[float]]] = None
    visibility: Optional[list[Optional[float]]] = None
    weather_code: Optional[list[Optional[int]]] = None
    uv_index_max: Optional[list[Optional[float]]] = None
    temperature_max: Optional[list[Optional[float]]] = None
    temperature_min: Optional[list[Optional[float]]] = None


class CurrentSnapshot(BaseModel):
    """Single-point "right now" values supplied by the feed."""

    model_config = ConfigDict(frozen=True)

    time: TimeValue = None
    temperature: Optional[float] = None
    wind_speed: Optional[float] = None
    wind_direction: Optional[float] = None
    wind_gusts: Optional[float] = None
    wave_height: Optional[float] = None
    wave_direction: Optional[float] = None
    swell_wave_height: Optional[float] = None
    swell_wave_direction: Optional[float] = None
    swell_wave_period: Optional[float] = None
    weather_code: Optional[int] = None
    precipitation: Optional[float] = None


class ForecastInput(BaseModel):
    """One refresh cycle worth of feed data.

    utc_offset_seconds is the offset of the feed's local time, used to
    place naive timestamp strings on the epoch scale.
    """

    model_config = ConfigDict(frozen=True)

    utc_offset_seconds: int = 0
    hourly: TimeSeries = Field(default_factory=TimeSeries)
    daily: Optional[TimeSeries] = None
    current: Optional[CurrentSnapshot] = None
