"""Fishing suitability scoring from wave, wind and swell."""

from fishcast.models.marine_schemas import FishingRating

# (upper bound exclusive, points); lower waves are better
WAVE_HEIGHT_POINTS: list[tuple[float, int]] = [
    (0.3, 5),
    (0.7, 4),
    (1.2, 3),
    (2.0, 2),
    (3.0, 1),
]

# Moderate wind scores best; flat calm is not ideal either
WIND_SPEED_POINTS: list[tuple[float, int]] = [
    (5.0, 3),
    (15.0, 5),
    (25.0, 3),
    (35.0, 1),
]

# (lower bound exclusive, points); longer periods mean a steadier sea
SWELL_PERIOD_POINTS: list[tuple[float, int]] = [
    (10.0, 5),
    (8.0, 4),
    (6.0, 3),
    (4.0, 2),
]

# Minimum average score for each rating, best first
RATING_THRESHOLDS: list[tuple[float, FishingRating]] = [
    (4.5, FishingRating.EXCELLENT),
    (3.5, FishingRating.GOOD),
    (2.5, FishingRating.FAIR),
]


def wave_height_points(wave_height: float) -> int:
    """Score wave height in meters (0-5)."""
    for limit, points in WAVE_HEIGHT_POINTS:
        if wave_height < limit:
            return points
    return 0


def wind_speed_points(wind_speed: float) -> int:
    """Score wind speed in km/h (0-5)."""
    for limit, points in WIND_SPEED_POINTS:
        if wind_speed < limit:
            return points
    return 0


def swell_period_points(swell_wave_period: float) -> int:
    """Score swell period in seconds (1-5)."""
    for limit, points in SWELL_PERIOD_POINTS:
        if swell_wave_period > limit:
            return points
    return 1


def rating_for_score(average: float) -> FishingRating:
    """Map an average factor score to a rating."""
    for minimum, rating in RATING_THRESHOLDS:
        if average >= minimum:
            return rating
    return FishingRating.POOR


def score_fishing_conditions(
    wave_height: float | None,
    wind_speed: float | None,
    swell_wave_period: float | None = None,
) -> FishingRating:
    """
    Rate fishing conditions from the current sea state.

    Wave height and wind speed are both required; swell period is used
    when present. The rating is the average of the per-factor scores.

    Args:
        wave_height: Wave height in meters.
        wind_speed: Wind speed in km/h.
        swell_wave_period: Swell period in seconds.

    Returns:
        FishingRating, Unknown when a required input is missing.
    """
    if wave_height is None or wind_speed is None:
        return FishingRating.UNKNOWN

    scores = [wave_height_points(wave_height), wind_speed_points(wind_speed)]
    if swell_wave_period is not None:
        scores.append(swell_period_points(swell_wave_period))

    return rating_for_score(sum(scores) / len(scores))
