"""Tests for the short-term precipitation outlook."""

import pytest

from fishcast.models.schemas import TimeSeries
from fishcast.services.precipitation import (
    forecast_precipitation,
    round_half_up,
    weighted_amount,
)


class TestRoundHalfUp:
    """Tests for one-decimal rounding."""

    def test_rounds_halves_up(self) -> None:
        """Exact halves should round up."""
        assert round_half_up(0.25) == 0.3
        assert round_half_up(2.0) == 2.0
        assert round_half_up(0.7909) == 0.8


class TestWeightedAmount:
    """Tests for recency-weighted amounts."""

    def test_single_populated_hour_is_renormalized(self) -> None:
        """One hour with rain should report that hour's amount."""
        assert weighted_amount([2.0, 0.0, 0.0, 0.0, 0.0, 0.0]) == 2.0
        assert weighted_amount([None, None, 3.0, None, None, None]) == 3.0

    def test_uniform_amount(self) -> None:
        """Equal amounts every hour should average to that amount."""
        assert weighted_amount([1.0] * 6) == 1.0

    def test_front_loaded_weights(self) -> None:
        """Earlier hours should pull the average harder."""
        # (4*0.35 + 2*0.25) / 0.6 = 3.17
        assert weighted_amount([4.0, 2.0, None, None, None, None]) == 3.2
        # (2*0.35 + 4*0.25) / 0.6 = 2.83
        assert weighted_amount([2.0, 4.0, None, None, None, None]) == 2.8

    def test_dry_hours_are_excluded(self) -> None:
        """Hours with 0 mm should not dilute the wet hours."""
        assert weighted_amount([1.0, 1.0, 0.0, 0.0, 0.0, 0.0]) == 1.0
        assert weighted_amount([2.0, 0.0, 0.0, 0.0, 0.0, 0.0]) == 2.0

    def test_no_data_is_zero(self) -> None:
        """No populated hour should give 0."""
        assert weighted_amount([None] * 6) == 0.0
        assert weighted_amount([]) == 0.0


class TestForecastPrecipitation:
    """Tests for the six-hour forecast."""

    def test_all_null_is_zero_forecast(self) -> None:
        """All-null arrays should give the zero forecast."""
        result = forecast_precipitation([None] * 6, [None] * 6)

        assert result.chance == 0
        assert result.amount == 0
        assert result.hour_by_hour == []

    @pytest.mark.parametrize(
        "probabilities,amounts",
        [(None, [1.0] * 6), ([50.0] * 6, None), (None, None), ([], []), ([10.0], [])],
    )
    def test_missing_arrays_give_zero_forecast(self, probabilities, amounts) -> None:
        """Absent or empty arrays should give the zero forecast without error."""
        result = forecast_precipitation(probabilities, amounts)
        assert result.model_dump() == {"chance": 0.0, "amount": 0.0, "hour_by_hour": []}

    def test_single_rainy_hour(self) -> None:
        """A single wet hour should keep its full amount."""
        result = forecast_precipitation(
            [100.0, 0.0, 0.0, 0.0, 0.0, 0.0],
            [2.0, 0.0, 0.0, 0.0, 0.0, 0.0],
        )

        assert result.chance == 100
        assert result.amount == 2.0
        assert len(result.hour_by_hour) == 6

    def test_window_starts_at_aligned_index(self, sample_hourly: TimeSeries) -> None:
        """Only the six hours from the start index should count."""
        result = forecast_precipitation(
            sample_hourly.precipitation_probability,
            sample_hourly.precipitation,
            start=10,
        )

        assert result.chance == 40.0
        # (1.0*0.35 + 0.5*0.15 + 0.2*0.05) / 0.55
        assert result.amount == 0.8
        assert [h.hour for h in result.hour_by_hour] == [0, 1, 3, 4, 5]

    def test_hour_by_hour_substitutes_null_amount(self, sample_hourly: TimeSeries) -> None:
        """Hours with a probability but no amount should report 0 mm."""
        result = forecast_precipitation(
            sample_hourly.precipitation_probability,
            sample_hourly.precipitation,
            start=10,
        )

        hour_one = result.hour_by_hour[1]
        assert hour_one.hour == 1
        assert hour_one.probability == 40.0
        assert hour_one.amount == 0.0

    def test_window_past_end_is_zero_forecast(self) -> None:
        """A start beyond the arrays should give the zero forecast."""
        result = forecast_precipitation([10.0] * 4, [1.0] * 4, start=10)
        assert result.chance == 0
        assert result.hour_by_hour == []

    def test_short_window_near_end(self) -> None:
        """A window cut short by the array end should use what remains."""
        result = forecast_precipitation([10.0, 20.0, 60.0], [0.0, 0.0, 1.2], start=1)

        assert result.chance == 60.0
        assert result.amount == 1.2
        assert [h.hour for h in result.hour_by_hour] == [0, 1]

    def test_no_known_probability(self) -> None:
        """Amounts without any probability should give chance 0 and no hours."""
        result = forecast_precipitation([None] * 6, [1.0] * 6)

        assert result.chance == 0
        assert result.amount == 1.0
        assert result.hour_by_hour == []
