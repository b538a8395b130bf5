"""Use cases behind the /health and /info endpoints."""

from datetime import datetime, timezone
from typing import Dict, Optional
from urllib.parse import urlsplit, urlunsplit

from foulwatch.application.dtos.health_dto import ApplicationInfoDTO, SystemHealthDTO
from foulwatch.application.models import SystemInfo
from foulwatch.domain.entities.health import ApplicationInfo
from foulwatch.domain.entities.plant import PlantConfiguration
from foulwatch.domain.ports.health_check import IHealthCheckService


def redact_credentials(url: str) -> str:
    """Drop any ``user:password@`` part from a URL."""
    if not url:
        return url

    parsed = urlsplit(url)
    if not (parsed.username or parsed.password):
        return url

    netloc = parsed.hostname or ""
    if parsed.port:
        netloc = f"{netloc}:{parsed.port}"
    return urlunsplit(
        (parsed.scheme, netloc, parsed.path, parsed.query, parsed.fragment)
    )


class GetHealthStatusUseCase:
    def __init__(self, health_check_service: IHealthCheckService) -> None:
        self._health_check_service = health_check_service

    async def execute(self) -> SystemHealthDTO:
        return SystemHealthDTO.from_domain(await self._health_check_service.evaluate())


class GetApplicationInfoUseCase:
    """Build metadata, uptime, historian status and the plant constants in effect."""

    def __init__(
        self,
        health_check_service: IHealthCheckService,
        system_info: SystemInfo,
        plant: PlantConfiguration,
    ) -> None:
        self._health_check_service = health_check_service
        self._info = system_info
        self._plant = plant

    async def execute(self, started_at: Optional[datetime]) -> ApplicationInfoDTO:
        system_health = await self._health_check_service.evaluate()

        now = datetime.now(timezone.utc)
        started = started_at or now

        return ApplicationInfoDTO.from_domain(
            ApplicationInfo(
                name=self._info.title,
                description=self._info.description,
                version=self._info.version,
                environment=self._info.environment,
                git_commit=self._info.git_commit,
                build_time=self._info.build_time,
                started_at=started,
                uptime_seconds=max(0.0, (now - started).total_seconds()),
                status=system_health.status,
                dependencies=system_health.dependencies,
                plant=self._plant,
                historian=self._historian(),
            )
        )

    def _historian(self) -> Dict[str, str]:
        return {
            "url": redact_credentials(self._info.influxdb_url),
            "bucket": self._info.influxdb_bucket,
        }
