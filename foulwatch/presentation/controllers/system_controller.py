"""
Presentation Layer - System Controller

Liveness and metadata endpoints. ``/health`` answers 503 while the
historian is down so orchestrators can route traffic away; ``/info``
always answers 200 with the configuration in effect.
"""

from datetime import datetime
from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from foulwatch.application.dtos.health_dto import ApplicationInfoDTO, SystemHealthDTO
from foulwatch.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthStatusUseCase,
)
from foulwatch.domain.entities.health import ServiceStatus
from foulwatch.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["System"])


def _started_at(request: Request) -> Optional[datetime]:
    return getattr(request.app.state, "started_at", None)


@router.get(
    "/health",
    response_model=SystemHealthDTO,
    responses={503: {"description": "The InfluxDB historian is down"}},
)
@inject
async def health(
    response: Response,
    get_health_status_use_case: GetHealthStatusUseCase = Depends(
        Provide["get_health_status_use_case"]
    ),
) -> SystemHealthDTO:
    try:
        health_status = await get_health_status_use_case.execute()
    except Exception as exc:  # pragma: no cover
        logger.error("health.check.failure", error=str(exc), exc_info=exc)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Unable to retrieve system health status",
        ) from exc

    if health_status.status is ServiceStatus.DOWN:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        logger.warning(
            "health.check.down", dependencies=len(health_status.dependencies)
        )
    return health_status


@router.get("/info", response_model=ApplicationInfoDTO)
@inject
async def info(
    request: Request,
    get_application_info_use_case: GetApplicationInfoUseCase = Depends(
        Provide["get_application_info_use_case"]
    ),
) -> ApplicationInfoDTO:
    """Build metadata, uptime and the plant parameters in effect."""
    try:
        return await get_application_info_use_case.execute(_started_at(request))
    except Exception as exc:  # pragma: no cover
        logger.error("info.fetch.failure", error=str(exc), exc_info=exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unable to retrieve application info",
        ) from exc
