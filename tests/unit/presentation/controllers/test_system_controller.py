from __future__ import annotations

from datetime import datetime, timezone
from types import SimpleNamespace

import pytest
from fastapi import Request, Response

from foulwatch.application.models import SystemInfo
from foulwatch.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthStatusUseCase,
)
from foulwatch.domain.entities.health import DependencyStatus, ServiceStatus, SystemHealth
from foulwatch.domain.entities.plant import PlantConfiguration
from foulwatch.presentation.controllers.system_controller import health, info


class _HealthService:
    def __init__(self, status: ServiceStatus):
        self._health = SystemHealth(
            status=status,
            dependencies=[DependencyStatus(name="influxdb", status=status)],
        )

    async def evaluate(self) -> SystemHealth:
        return self._health


@pytest.mark.asyncio
async def test_health_endpoint_returns_status():
    response = Response()
    dto = await health(
        response=response,
        get_health_status_use_case=GetHealthStatusUseCase(
            _HealthService(ServiceStatus.UP)
        ),
    )
    assert response.status_code == 200
    assert dto.status is ServiceStatus.UP
    assert dto.dependencies[0].name == "influxdb"


@pytest.mark.asyncio
async def test_health_endpoint_answers_503_when_historian_is_down():
    response = Response()

    dto = await health(
        response=response,
        get_health_status_use_case=GetHealthStatusUseCase(
            _HealthService(ServiceStatus.DOWN)
        ),
    )

    assert dto.status is ServiceStatus.DOWN
    assert response.status_code == 503


@pytest.mark.asyncio
async def test_info_endpoint_returns_application_info():
    health_service = _HealthService(ServiceStatus.UP)
    system_info = SystemInfo(
        title="Foulwatch",
        description="desc",
        version="1.0",
        environment="dev",
        git_commit="abc",
        build_time="now",
        influxdb_url="http://influx:8086",
        influxdb_bucket="condenser",
    )
    info_use_case = GetApplicationInfoUseCase(
        health_service, system_info, PlantConfiguration()
    )

    scope = {
        "type": "http",
        "method": "GET",
        "path": "/info",
        "headers": [],
        "query_string": b"",
        "server": ("test", 80),
        "app": SimpleNamespace(
            state=SimpleNamespace(started_at=datetime.now(timezone.utc))
        ),
    }
    request = Request(scope)

    dto = await info(request=request, get_application_info_use_case=info_use_case)
    assert dto.name == "Foulwatch"
    assert dto.status is ServiceStatus.UP
    assert dto.plant.clean_u == 2500.0
    assert dto.historian["bucket"] == "condenser"
