from __future__ import annotations

import pytest

from foulwatch.domain.entities.errors import DataUnavailableError
from foulwatch.domain.entities.plant import PlantConfiguration
from foulwatch.domain.entities.reading import Timeframe
from foulwatch.domain.services.forecast_pipeline import ForecastPipeline
from foulwatch.application.use_cases.dashboard_use_cases import (
    GetDashboardUseCase,
    GetReadingsUseCase,
)
from tests.conftest import FakeReadingSource, hourly_series, linear_values


@pytest.mark.asyncio
async def test_dashboard_runs_pipeline_on_source_readings() -> None:
    source = FakeReadingSource(hourly_series(linear_values(0.00002, 0.00004, 48)), dropped=2)
    use_case = GetDashboardUseCase(source, ForecastPipeline(PlantConfiguration()))

    dto = await use_case.execute(Timeframe.LAST_24_HOURS)

    assert source.requested == [Timeframe.LAST_24_HOURS]
    assert dto.data_available is True
    assert dto.timeframe is Timeframe.LAST_24_HOURS
    assert len(dto.annotated_series) == 24
    assert dto.latest is not None
    assert dto.latest.cost_breakdown.total_cost > dto.latest.daily_cost
    assert dto.dropped_records == 2


@pytest.mark.asyncio
async def test_dashboard_reports_unavailable_source_as_no_data() -> None:
    source = FakeReadingSource(error=DataUnavailableError("historian down"))
    use_case = GetDashboardUseCase(source, ForecastPipeline(PlantConfiguration()))

    dto = await use_case.execute(Timeframe.LAST_7_DAYS)

    assert dto.data_available is False
    assert dto.annotated_series == []
    assert dto.latest is None
    assert dto.alerts == []


@pytest.mark.asyncio
async def test_dashboard_with_empty_source() -> None:
    use_case = GetDashboardUseCase(
        FakeReadingSource(dropped=4), ForecastPipeline(PlantConfiguration())
    )

    dto = await use_case.execute(Timeframe.LAST_24_HOURS)

    assert dto.data_available is False
    assert dto.dropped_records == 4


@pytest.mark.asyncio
async def test_readings_are_filtered_and_sorted() -> None:
    readings = hourly_series([0.00002] * 30)
    use_case = GetReadingsUseCase(FakeReadingSource(list(reversed(readings))))

    dto = await use_case.execute(Timeframe.LAST_24_HOURS)

    timestamps = [reading.timestamp for reading in dto.readings]
    assert len(timestamps) == 24
    assert timestamps == sorted(timestamps)


@pytest.mark.asyncio
async def test_readings_with_unavailable_source_are_empty() -> None:
    use_case = GetReadingsUseCase(FakeReadingSource(error=DataUnavailableError("down")))

    dto = await use_case.execute(Timeframe.LAST_30_DAYS)

    assert dto.readings == []
