"""
Application DTOs - Health and Info

Payloads of the /health and /info endpoints. The info payload echoes the
plant constants and alert thresholds the service is running with, so an
operator can check a deployment without reading its environment.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from foulwatch.domain.entities.health import (
    ApplicationInfo,
    DependencyStatus,
    ServiceStatus,
    SystemHealth,
)
from foulwatch.domain.entities.plant import AlertThresholds, PlantConfiguration


class DependencyStatusDTO(BaseModel):
    """Outcome of one dependency health check."""

    name: str
    status: ServiceStatus
    message: Optional[str] = None
    checked_at: datetime
    latency_ms: Optional[float] = Field(default=None, description="Check latency (ms)")
    details: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_domain(cls, status: DependencyStatus) -> "DependencyStatusDTO":
        return cls(
            name=status.name,
            status=status.status,
            message=status.message,
            checked_at=status.checked_at,
            latency_ms=status.latency_ms,
            details=status.details,
        )


class SystemHealthDTO(BaseModel):
    """Response of /health; ``status`` is the worst dependency status."""

    status: ServiceStatus
    dependencies: List[DependencyStatusDTO] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, health: SystemHealth) -> "SystemHealthDTO":
        return cls(
            status=health.status,
            dependencies=[
                DependencyStatusDTO.from_domain(dep) for dep in health.dependencies
            ],
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "status": "up",
                "dependencies": [
                    {
                        "name": "influxdb",
                        "status": "up",
                        "message": "HTTP 200",
                        "checked_at": "2025-03-01T12:00:00Z",
                        "latency_ms": 8.4,
                        "details": {"url": "http://influxdb:8086/health"},
                    }
                ],
            }
        }
    }


class AlertThresholdsDTO(BaseModel):
    critical_fouling_resistance: float = Field(description="m²K/W")
    min_efficiency_percent: float
    max_daily_cost: float
    max_co2_kg_per_day: float

    @classmethod
    def from_domain(cls, thresholds: AlertThresholds) -> "AlertThresholdsDTO":
        return cls(
            critical_fouling_resistance=thresholds.critical_fouling_resistance,
            min_efficiency_percent=thresholds.min_efficiency_percent,
            max_daily_cost=thresholds.max_daily_cost,
            max_co2_kg_per_day=thresholds.max_co2_kg_per_day,
        )


class PlantSummaryDTO(BaseModel):
    """Plant constants in effect for every metric and forecast."""

    clean_u: float = Field(description="Clean heat transfer coefficient (W/m²K)")
    area: float = Field(description="Heat transfer area (m²)")
    energy_rate: float
    operating_hours: float
    coal_price: float
    currency_symbol: str
    trend_window: int
    seasonal_adjustment: bool
    thresholds: AlertThresholdsDTO

    @classmethod
    def from_domain(cls, plant: PlantConfiguration) -> "PlantSummaryDTO":
        return cls(
            clean_u=plant.clean_u,
            area=plant.area,
            energy_rate=plant.energy_rate,
            operating_hours=plant.operating_hours,
            coal_price=plant.coal_price,
            currency_symbol=plant.currency_symbol,
            trend_window=plant.trend_window,
            seasonal_adjustment=plant.seasonal_adjustment,
            thresholds=AlertThresholdsDTO.from_domain(plant.thresholds),
        )


class ApplicationInfoDTO(BaseModel):
    """Response of /info."""

    name: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    started_at: datetime
    uptime_seconds: float = Field(ge=0)
    status: ServiceStatus
    dependencies: List[DependencyStatusDTO] = Field(default_factory=list)
    plant: Optional[PlantSummaryDTO] = None
    historian: Dict[str, str] = Field(
        default_factory=dict, description="InfluxDB location, credentials removed"
    )

    @classmethod
    def from_domain(cls, info: ApplicationInfo) -> "ApplicationInfoDTO":
        return cls(
            name=info.name,
            description=info.description,
            version=info.version,
            environment=info.environment,
            git_commit=info.git_commit,
            build_time=info.build_time,
            started_at=info.started_at,
            uptime_seconds=info.uptime_seconds,
            status=info.status,
            dependencies=[
                DependencyStatusDTO.from_domain(dep) for dep in info.dependencies
            ],
            plant=PlantSummaryDTO.from_domain(info.plant) if info.plant else None,
            historian=info.historian,
        )
