"""
Domain Service - Forecast Pipeline

One run goes Filtering -> TrendFitting -> SeasonalAdjusting -> Annotating
-> Done over an immutable snapshot of readings. Nothing is kept between
runs, so one pipeline instance can serve concurrent callers.
"""

from enum import Enum
from typing import Iterable, List, Optional

import structlog

from foulwatch.domain.entities.plant import PlantConfiguration
from foulwatch.domain.entities.reading import (
    AnnotatedPoint,
    ForecastResult,
    LatestSummary,
    Reading,
    Timeframe,
)
from foulwatch.domain.services import metric_calculator as metrics
from foulwatch.domain.services.alert_evaluator import evaluate_alerts
from foulwatch.domain.services.configuration_validator import (
    validate_plant_configuration,
)
from foulwatch.domain.services.process_status import evaluate_process_status
from foulwatch.domain.services.seasonal_adjuster import (
    NEUTRAL_FACTOR,
    seasonal_factor,
)
from foulwatch.domain.services.timeframe_filter import filter_timeframe
from foulwatch.domain.services.trend_estimator import estimate_slope

logger = structlog.get_logger(__name__)


class PipelineStage(str, Enum):
    FILTERING = "filtering"
    TREND_FITTING = "trend_fitting"
    SEASONAL_ADJUSTING = "seasonal_adjusting"
    ANNOTATING = "annotating"
    DONE = "done"


def _clamp_non_negative(value: float) -> float:
    return max(value, 0.0)


class ForecastPipeline:
    """Annotates a reading window with metrics, forecasts and alerts."""

    def __init__(self, config: PlantConfiguration):
        """
        Build a pipeline for one plant.

        Raises:
            ConfigurationError: If the plant configuration is invalid.
        """
        validate_plant_configuration(config)
        self.config = config

    def run(
        self,
        readings: Iterable[Reading],
        timeframe: Timeframe = Timeframe.LAST_24_HOURS,
        dropped_records: int = 0,
    ) -> ForecastResult:
        history = sorted(readings, key=lambda reading: reading.timestamp)

        self._log_stage(PipelineStage.FILTERING, readings=len(history))
        window = filter_timeframe(history, timeframe)
        if not window:
            logger.info("pipeline.no_data", timeframe=timeframe.value)
            return ForecastResult.empty(dropped_records=dropped_records)

        slope = 0.0
        factor = NEUTRAL_FACTOR
        if len(window) >= 2:
            self._log_stage(PipelineStage.TREND_FITTING, points=len(window))
            slope = estimate_slope(window, self.config.trend_window)

            if self.config.seasonal_adjustment:
                self._log_stage(PipelineStage.SEASONAL_ADJUSTING)
                factor = seasonal_factor(history, window[-1].timestamp)

        self._log_stage(PipelineStage.ANNOTATING)
        series = self._annotate(window, slope, factor)
        latest = self.summarize(series[-1])
        alerts = evaluate_alerts(
            latest, self.config.thresholds, self.config.currency_symbol
        )

        result = ForecastResult(
            annotated_series=series,
            latest=latest,
            alerts=alerts,
            slope=slope,
            seasonal_factor=factor,
            next_predicted_fouling_resistance=self._next_prediction(
                window, slope, factor
            ),
            dropped_records=dropped_records,
        )

        self._log_stage(PipelineStage.DONE)
        logger.info(
            "pipeline.completed",
            timeframe=timeframe.value,
            points=len(series),
            slope=slope,
            seasonal_factor=factor,
            alerts=len(alerts),
            dropped_records=dropped_records,
        )
        return result

    def annotate(self, reading: Reading, predicted: float) -> AnnotatedPoint:
        return AnnotatedPoint(
            reading=reading,
            efficiency_percent=metrics.thermal_efficiency(
                reading.fouled_u, self.config.clean_u
            ),
            energy_loss_kw=metrics.energy_loss_kw(
                self.config.clean_u, reading.fouled_u, self.config.area, reading.lmtd
            ),
            predicted_fouling_resistance=predicted,
        )

    def summarize(self, point: AnnotatedPoint) -> LatestSummary:
        """Cost, emission and gauge figures for one annotated point."""
        energy_cost = metrics.daily_cost(
            point.energy_loss_kw, self.config.energy_rate, self.config.operating_hours
        )
        coal_tons = metrics.coal_consumption_tons_per_day(
            point.energy_loss_kw, self.config.operating_hours
        )
        return LatestSummary(
            point=point,
            costs=metrics.cost_breakdown(
                energy_cost, coal_tons, self.config.coal_price
            ),
            coal_tons_per_day=coal_tons,
            co2_kg_per_day=metrics.co2_emissions_kg_per_day(coal_tons),
            process_statuses=evaluate_process_status(
                point.reading, self.config.gauges
            ),
        )

    def _annotate(
        self, window: List[Reading], slope: float, factor: float
    ) -> List[AnnotatedPoint]:
        """Predicted Rfoul per point, clamped at 0; negative raw Rfoul is not echoed."""
        if len(window) < 2:
            return [
                self.annotate(reading, _clamp_non_negative(reading.fouling_resistance))
                for reading in window
            ]

        series: List[AnnotatedPoint] = []
        for index, reading in enumerate(window):
            previous = window[index - 1] if index > 0 else reading
            predicted = (previous.fouling_resistance + slope) * factor
            series.append(self.annotate(reading, _clamp_non_negative(predicted)))
        return series

    def _next_prediction(
        self, window: List[Reading], slope: float, factor: float
    ) -> Optional[float]:
        last_actual = window[-1].fouling_resistance
        if len(window) < 2:
            return _clamp_non_negative(last_actual)
        return _clamp_non_negative((last_actual + slope) * factor)

    def _log_stage(self, stage: PipelineStage, **context) -> None:
        logger.debug("pipeline.stage", stage=stage.value, **context)
