"""
Presentation Layer - Dashboard Controller

Exposes the fouling analytics of the condenser: annotated series, latest
KPIs, cost breakdown, alerts and the raw readings behind them.
"""

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Query

from foulwatch.application.dtos.dashboard_dto import (
    DashboardResponseDTO,
    ReadingsResponseDTO,
)
from foulwatch.application.use_cases.dashboard_use_cases import (
    GetDashboardUseCase,
    GetReadingsUseCase,
)
from foulwatch.domain.entities.reading import Timeframe
from foulwatch.shared.consts import HEAT_EXCHANGER_PREFIX

logger = structlog.get_logger(__name__)

router = APIRouter(prefix=HEAT_EXCHANGER_PREFIX, tags=["Heat Exchanger"])


@router.get(
    "/dashboard",
    response_model=DashboardResponseDTO,
    summary="Fouling KPIs, forecast and alerts",
    description="""
    Fetch the latest readings, keep the requested trailing timeframe and
    return every point annotated with efficiency, energy loss and the
    predicted fouling resistance, followed by the latest point's cost
    breakdown and the operational alerts it triggers. An unreachable
    historian yields an empty payload with `data_available=false`.
    """,
)
@inject
async def get_dashboard(
    timeframe: Timeframe = Query(
        default=Timeframe.LAST_24_HOURS, description="Trailing lookback window"
    ),
    dashboard_use_case: GetDashboardUseCase = Depends(
        Provide["get_dashboard_use_case"]
    ),
) -> DashboardResponseDTO:
    try:
        return await dashboard_use_case.execute(timeframe)
    except Exception as exc:
        logger.error(
            "dashboard.unexpected_error",
            timeframe=timeframe.value,
            error=str(exc),
            exc_info=exc,
        )
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get(
    "/readings",
    response_model=ReadingsResponseDTO,
    summary="Raw readings of a timeframe",
)
@inject
async def get_readings(
    timeframe: Timeframe = Query(
        default=Timeframe.LAST_24_HOURS, description="Trailing lookback window"
    ),
    readings_use_case: GetReadingsUseCase = Depends(Provide["get_readings_use_case"]),
) -> ReadingsResponseDTO:
    try:
        return await readings_use_case.execute(timeframe)
    except Exception as exc:
        logger.error(
            "readings.unexpected_error",
            timeframe=timeframe.value,
            error=str(exc),
            exc_info=exc,
        )
        raise HTTPException(status_code=500, detail="Internal server error")
