"""Infrastructure implementation for system health checks."""

from __future__ import annotations

from time import perf_counter
from urllib.parse import urljoin

import httpx

from foulwatch.domain.entities.health import (
    DependencyStatus,
    ServiceStatus,
    SystemHealth,
)
from foulwatch.domain.ports.health_check import IHealthCheckService
from foulwatch.shared.consts import HISTORIAN_DEPENDENCY


class HealthCheckService(IHealthCheckService):
    """Check the InfluxDB historian through its ``/health`` endpoint."""

    def __init__(self, influxdb_url: str, *, http_timeout: float = 5.0) -> None:
        self._influxdb_url = influxdb_url
        self._http_timeout = http_timeout

    async def evaluate(self) -> SystemHealth:
        dependencies = [await self._check_influxdb()]
        overall_status = ServiceStatus.aggregate([dep.status for dep in dependencies])
        return SystemHealth(status=overall_status, dependencies=dependencies)

    async def _check_influxdb(self) -> DependencyStatus:
        if not self._influxdb_url:
            return DependencyStatus(
                name=HISTORIAN_DEPENDENCY,
                status=ServiceStatus.UNKNOWN,
                message="InfluxDB URL not configured.",
            )

        url = self._normalize_url(self._influxdb_url, "/health")
        start = perf_counter()

        try:
            async with httpx.AsyncClient(timeout=self._http_timeout) as client:
                response = await client.get(url)
        except httpx.RequestError as exc:
            latency_ms = (perf_counter() - start) * 1000
            return DependencyStatus(
                name=HISTORIAN_DEPENDENCY,
                status=ServiceStatus.DOWN,
                message=f"HTTP request failed: {exc}",
                latency_ms=latency_ms,
                details={"url": url},
            )

        latency_ms = (perf_counter() - start) * 1000
        status_code = response.status_code

        if status_code >= 500:
            status = ServiceStatus.DOWN
        elif status_code >= 400:
            status = ServiceStatus.DEGRADED
        else:
            status = ServiceStatus.UP

        return DependencyStatus(
            name=HISTORIAN_DEPENDENCY,
            status=status,
            message=f"HTTP {status_code}",
            latency_ms=latency_ms,
            details={"url": url, "status_code": status_code},
        )

    def _normalize_url(self, base_url: str, path: str) -> str:
        base = base_url if base_url.endswith("/") else f"{base_url}/"
        return urljoin(base, path.lstrip("/"))
