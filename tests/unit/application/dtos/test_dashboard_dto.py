from __future__ import annotations

import pytest
from pydantic import ValidationError

from foulwatch.application.dtos.dashboard_dto import DashboardResponseDTO, LatestPointDTO
from foulwatch.domain.entities.plant import PlantConfiguration
from foulwatch.domain.entities.reading import ForecastResult, Timeframe
from foulwatch.domain.services.forecast_pipeline import ForecastPipeline
from tests.conftest import hourly_series


def test_from_domain_maps_latest_point() -> None:
    result = ForecastPipeline(PlantConfiguration()).run(hourly_series([0.00002, 0.00003]))

    dto = DashboardResponseDTO.from_domain(result, Timeframe.LAST_24_HOURS)

    latest = dto.latest
    assert isinstance(latest, LatestPointDTO)
    assert latest.actual_fouling_resistance == pytest.approx(0.00003)
    assert latest.fouling_resistance == pytest.approx(0.00003)
    assert latest.efficiency_percent == pytest.approx(92.0)
    assert [status.name for status in latest.process_status][0] == "cooling_water_in_temp"
    assert dto.alerts[0].severity.value == "COST"


def test_empty_result_serializes() -> None:
    dto = DashboardResponseDTO.from_domain(
        ForecastResult.empty(), Timeframe.LAST_30_DAYS, data_available=False
    )

    payload = dto.model_dump(mode="json")

    assert payload["timeframe"] == "30d"
    assert payload["latest"] is None
    assert payload["seasonal_factor"] == 1.0


def test_seasonal_factor_outside_bounds_is_rejected() -> None:
    with pytest.raises(ValidationError):
        DashboardResponseDTO(
            timeframe=Timeframe.LAST_24_HOURS, data_available=True, seasonal_factor=1.5
        )
