"""Pydantic models for derived marine and fishing conditions."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from fishcast.models.schemas import TimeValue


class FishingRating(str, Enum):
    """Categorical fishing suitability."""

    UNKNOWN = "Unknown"
    POOR = "Poor"
    FAIR = "Fair"
    GOOD = "Good"
    EXCELLENT = "Excellent"


class DerivedConditions(BaseModel):
    """Model for the flat current-conditions snapshot."""

    temperature: Optional[float] = None
    wind_speed: Optional[float] = None
    wind_direction: Optional[float] = None
    wave_height: Optional[float] = None
    wave_direction: Optional[float] = None
    swell_wave_height: Optional[float] = None
    swell_wave_direction: Optional[float] = None
    swell_wave_period: Optional[float] = None
    wind_gusts: Optional[float] = None
    weather_code: Optional[int] = None
    fishing_rating: FishingRating = FishingRating.UNKNOWN


class HourlyPrecipitation(BaseModel):
    """Model for one hour of the short-term precipitation outlook."""

    hour: int
    probability: float
    amount: float = 0.0


class PrecipitationForecast(BaseModel):
    """Model for the 6-hour precipitation outlook."""

    chance: float = 0.0  # Max probability over the window (0-100)
    amount: float = 0.0  # Weighted mm estimate
    hour_by_hour: list[HourlyPrecipitation] = Field(default_factory=list)


class DayAggregate(BaseModel):
    """Model for per-day wind and wave averages."""

    date: TimeValue = None
    avg_wind_speed: Optional[float] = None
    avg_wind_direction: Optional[float] = None
    avg_wave_height: Optional[float] = None
    avg_wave_direction: Optional[float] = None


class MarineReport(BaseModel):
    """Model for everything derived from one forecast refresh."""

    aligned_index: int = 0
    conditions: DerivedConditions = Field(default_factory=DerivedConditions)
    precipitation: PrecipitationForecast = Field(default_factory=PrecipitationForecast)
    days: list[DayAggregate] = Field(default_factory=list)


class DaySummary(BaseModel):
    """Model for one day of display labels."""

    date: TimeValue = None
    wind_speed: Optional[float] = None
    wind_compass: Optional[str] = None
    wave_height: Optional[float] = None
    wave_compass: Optional[str] = None
    condition: str = "Unknown"
    temperature_max: Optional[float] = None
    temperature_min: Optional[float] = None
    uv_index: Optional[float] = None
    uv_level: str = "Unknown"


class ConditionsSummary(BaseModel):
    """Model for display-ready labels derived from a marine report."""

    fishing_rating: FishingRating = FishingRating.UNKNOWN
    condition: str = "Unknown"
    wind_compass: Optional[str] = None
    wave_compass: Optional[str] = None
    swell_compass: Optional[str] = None
    advice: str = "Marine data not available"
    rain_chance: float = 0.0
    rain_amount: float = 0.0
    days: list[DaySummary] = Field(default_factory=list)


class MarineReportResponse(BaseModel):
    """Model for marine report lookups by coordinates."""

    success: bool
    data: Optional[MarineReport] = None
    error_message: Optional[str] = None
