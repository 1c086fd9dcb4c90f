"""Short-term precipitation outlook from hourly probability and amount."""

import math
from typing import Sequence

from fishcast.models.marine_schemas import HourlyPrecipitation, PrecipitationForecast
from fishcast.services.extractor import value_at

HORIZON_HOURS = 6

# Earlier hours weighted more; sums to 1
HOUR_WEIGHTS: tuple[float, ...] = (0.35, 0.25, 0.15, 0.10, 0.10, 0.05)


def round_half_up(value: float, digits: int = 1) -> float:
    """Round to ``digits`` decimals with halves away from zero for positives."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def weighted_amount(amounts: Sequence[float | None]) -> float:
    """
    Recency-weighted average amount over the horizon.

    Hours without a measurable amount (null or 0 mm) drop out of both the
    sum and the weight total, so the remaining weights are renormalized.
    """
    total = 0.0
    weight_sum = 0.0
    for hour, weight in enumerate(HOUR_WEIGHTS):
        amount = value_at(amounts, hour)
        # Dry hours drop out with null ones: [1, 1, 0, 0, 0, 0] gives 1.0
        # where weighting the zeros would give 0.6
        if amount:
            total += amount * weight
            weight_sum += weight

    if weight_sum <= 0:
        return 0.0
    return round_half_up(total / weight_sum, 1)


def forecast_precipitation(
    probabilities: Sequence[float | None] | None,
    amounts: Sequence[float | None] | None,
    start: int = 0,
) -> PrecipitationForecast:
    """
    Summarize rain over the next six hours.

    Args:
        probabilities: Hourly precipitation probability (%).
        amounts: Hourly precipitation amount (mm).
        start: Aligned index where the horizon begins.

    Returns:
        PrecipitationForecast; the zero forecast when data is missing.
    """
    if probabilities is None or amounts is None:
        return PrecipitationForecast()

    window_probabilities = list(probabilities[start:start + HORIZON_HOURS])
    window_amounts = list(amounts[start:start + HORIZON_HOURS])
    if not window_probabilities or not window_amounts:
        return PrecipitationForecast()

    known = [p for p in window_probabilities if p is not None]
    chance = max(known) if known else 0.0

    hour_by_hour: list[HourlyPrecipitation] = []
    for hour in range(HORIZON_HOURS):
        probability = value_at(window_probabilities, hour)
        if probability is None:
            continue
        amount = value_at(window_amounts, hour)
        hour_by_hour.append(
            HourlyPrecipitation(
                hour=hour,
                probability=probability,
                amount=amount if amount is not None else 0.0,
            )
        )

    return PrecipitationForecast(
        chance=chance,
        amount=weighted_amount(window_amounts),
        hour_by_hour=hour_by_hour,
    )
