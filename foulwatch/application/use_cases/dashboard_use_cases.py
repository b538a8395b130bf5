"""
Application Use Cases - Dashboard

Fetches readings from the plant historian and runs the forecast pipeline.
A failing or empty source is reported as "no data", never as an error.
"""

from __future__ import annotations

from typing import Tuple

import structlog

from foulwatch.application.dtos.dashboard_dto import (
    DashboardResponseDTO,
    ReadingDTO,
    ReadingsResponseDTO,
)
from foulwatch.domain.entities.errors import DataUnavailableError
from foulwatch.domain.entities.reading import (
    ForecastResult,
    ParsedReadings,
    Timeframe,
)
from foulwatch.domain.gateways.reading_source import IReadingSource
from foulwatch.domain.services.forecast_pipeline import ForecastPipeline
from foulwatch.domain.services.timeframe_filter import filter_timeframe

logger = structlog.get_logger(__name__)


async def _fetch_or_empty(
    reading_source: IReadingSource, timeframe: Timeframe
) -> Tuple[ParsedReadings, bool]:
    try:
        parsed = await reading_source.fetch_readings(timeframe)
    except DataUnavailableError as exc:
        logger.warning(
            "dashboard.source_unavailable",
            timeframe=timeframe.value,
            error=exc.message,
        )
        return ParsedReadings(), False
    return parsed, bool(parsed.readings)


class GetDashboardUseCase:
    """Builds the annotated series, latest summary and alerts."""

    def __init__(self, reading_source: IReadingSource, pipeline: ForecastPipeline):
        self.reading_source = reading_source
        self.pipeline = pipeline

    async def execute(self, timeframe: Timeframe) -> DashboardResponseDTO:
        logger.info("dashboard.requested", timeframe=timeframe.value)

        parsed, data_available = await _fetch_or_empty(self.reading_source, timeframe)
        if not data_available:
            result = ForecastResult.empty(dropped_records=parsed.dropped)
        else:
            result = self.pipeline.run(
                parsed.readings, timeframe, dropped_records=parsed.dropped
            )

        return DashboardResponseDTO.from_domain(
            result, timeframe, data_available=data_available
        )


class GetReadingsUseCase:
    """Returns the raw readings of a timeframe, oldest first."""

    def __init__(self, reading_source: IReadingSource):
        self.reading_source = reading_source

    async def execute(self, timeframe: Timeframe) -> ReadingsResponseDTO:
        parsed, _ = await _fetch_or_empty(self.reading_source, timeframe)
        window = filter_timeframe(
            sorted(parsed.readings, key=lambda reading: reading.timestamp), timeframe
        )
        return ReadingsResponseDTO(
            timeframe=timeframe,
            readings=[ReadingDTO.from_domain(reading) for reading in window],
            dropped_records=parsed.dropped,
        )
