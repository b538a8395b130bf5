from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import timedelta

import pytest

from foulwatch.domain.entities.reading import CostBreakdown, ForecastResult, Timeframe
from tests.conftest import make_reading


@pytest.mark.parametrize(
    "timeframe, days",
    [
        (Timeframe.LAST_24_HOURS, 1),
        (Timeframe.LAST_7_DAYS, 7),
        (Timeframe.LAST_30_DAYS, 30),
    ],
)
def test_timeframe_windows(timeframe: Timeframe, days: int) -> None:
    assert timeframe.window == timedelta(days=days)


def test_timeframe_parses_from_query_value() -> None:
    assert Timeframe("7d") is Timeframe.LAST_7_DAYS


def test_readings_are_immutable() -> None:
    reading = make_reading()
    with pytest.raises(FrozenInstanceError):
        reading.fouled_u = 1.0  # type: ignore[misc]


def test_cost_breakdown_total() -> None:
    assert CostBreakdown(100.0, 15.0, 8.0, 2.0).total_cost == pytest.approx(125.0)


def test_empty_forecast_result() -> None:
    result = ForecastResult.empty(dropped_records=2)

    assert result.latest is None
    assert result.seasonal_factor == 1.0
    assert result.dropped_records == 2
