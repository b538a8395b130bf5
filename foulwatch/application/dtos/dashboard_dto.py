"""
Application DTOs - Dashboard

Data Transfer Objects for the dashboard payload consumed by the
presentation layer. Percentages are 0-100, fouling resistance is in
m²K/W and costs are in the deployment currency.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from foulwatch.domain.entities.reading import (
    Alert,
    AlertSeverity,
    AnnotatedPoint,
    CostBreakdown,
    ForecastResult,
    GaugeState,
    LatestSummary,
    ProcessStatus,
    Reading,
    Timeframe,
)


class ReadingDTO(BaseModel):
    """A raw heat-exchanger sample."""

    timestamp: datetime
    saturation_pressure: float = Field(description="Saturation pressure (bar)")
    saturation_temperature: float = Field(description="Saturation temperature (°C)")
    lmtd: float = Field(description="Log mean temperature difference (°C)")
    cooling_water_in_temp: float = Field(description="Cooling water inlet (°C)")
    cooling_water_out_temp: float = Field(description="Cooling water outlet (°C)")
    cooling_water_mass_flow: float = Field(description="Cooling water flow (kg/h)")
    specific_heat_capacity: float = Field(description="Cp of water (kJ/kg·K)")
    fouled_u: float = Field(description="Fouled heat transfer coefficient (W/m²K)")
    clean_u: float = Field(description="Clean heat transfer coefficient (W/m²K)")
    fouling_resistance: float = Field(description="Fouling resistance (m²K/W)")

    @classmethod
    def from_domain(cls, reading: Reading) -> "ReadingDTO":
        return cls(
            timestamp=reading.timestamp,
            saturation_pressure=reading.saturation_pressure,
            saturation_temperature=reading.saturation_temperature,
            lmtd=reading.lmtd,
            cooling_water_in_temp=reading.cooling_water_in_temp,
            cooling_water_out_temp=reading.cooling_water_out_temp,
            cooling_water_mass_flow=reading.cooling_water_mass_flow,
            specific_heat_capacity=reading.specific_heat_capacity,
            fouled_u=reading.fouled_u,
            clean_u=reading.clean_u,
            fouling_resistance=reading.fouling_resistance,
        )


class AnnotatedPointDTO(ReadingDTO):
    """A reading with its derived metrics and fouling forecast."""

    efficiency_percent: float
    energy_loss_kw: float
    actual_fouling_resistance: float
    predicted_fouling_resistance: float = Field(ge=0)

    @classmethod
    def from_point(cls, point: AnnotatedPoint) -> "AnnotatedPointDTO":
        return cls(
            **ReadingDTO.from_domain(point.reading).model_dump(),
            efficiency_percent=point.efficiency_percent,
            energy_loss_kw=point.energy_loss_kw,
            actual_fouling_resistance=point.actual_fouling_resistance,
            predicted_fouling_resistance=point.predicted_fouling_resistance,
        )


class CostBreakdownDTO(BaseModel):
    energy_cost: float
    maintenance_cost: float
    efficiency_loss_cost: float
    environmental_cost: float
    total_cost: float

    @classmethod
    def from_domain(cls, costs: CostBreakdown) -> "CostBreakdownDTO":
        return cls(
            energy_cost=costs.energy_cost,
            maintenance_cost=costs.maintenance_cost,
            efficiency_loss_cost=costs.efficiency_loss_cost,
            environmental_cost=costs.environmental_cost,
            total_cost=costs.total_cost,
        )


class ProcessStatusDTO(BaseModel):
    name: str
    value: float
    unit: str
    min: float
    max: float
    target: float
    status: GaugeState

    @classmethod
    def from_domain(cls, status: ProcessStatus) -> "ProcessStatusDTO":
        return cls(
            name=status.name,
            value=status.value,
            unit=status.unit,
            min=status.minimum,
            max=status.maximum,
            target=status.target,
            status=status.state,
        )


class LatestPointDTO(AnnotatedPointDTO):
    """The most recent point with its cost breakdown and emissions."""

    daily_cost: float
    cost_breakdown: CostBreakdownDTO
    coal_tons_per_day: float
    co2_kg_per_day: float
    process_status: List[ProcessStatusDTO] = Field(default_factory=list)

    @classmethod
    def from_summary(cls, summary: LatestSummary) -> "LatestPointDTO":
        return cls(
            **AnnotatedPointDTO.from_point(summary.point).model_dump(),
            daily_cost=summary.daily_cost,
            cost_breakdown=CostBreakdownDTO.from_domain(summary.costs),
            coal_tons_per_day=summary.coal_tons_per_day,
            co2_kg_per_day=summary.co2_kg_per_day,
            process_status=[
                ProcessStatusDTO.from_domain(status)
                for status in summary.process_statuses
            ],
        )


class AlertDTO(BaseModel):
    severity: AlertSeverity
    message: str

    @classmethod
    def from_domain(cls, alert: Alert) -> "AlertDTO":
        return cls(severity=alert.severity, message=alert.message)


class DashboardResponseDTO(BaseModel):
    """DTO returned by the dashboard endpoint."""

    timeframe: Timeframe
    data_available: bool = Field(
        description="False when the reading source failed or returned nothing"
    )
    annotated_series: List[AnnotatedPointDTO] = Field(default_factory=list)
    latest: Optional[LatestPointDTO] = None
    alerts: List[AlertDTO] = Field(default_factory=list)
    slope: float = Field(
        default=0.0, description="Fouling resistance trend per sample (m²K/W)"
    )
    seasonal_factor: float = Field(default=1.0, ge=0.8, le=1.2)
    next_predicted_fouling_resistance: Optional[float] = Field(default=None, ge=0)
    dropped_records: int = Field(
        default=0, ge=0, description="Malformed source records that were rejected"
    )

    @classmethod
    def from_domain(
        cls, result: ForecastResult, timeframe: Timeframe, data_available: bool = True
    ) -> "DashboardResponseDTO":
        return cls(
            timeframe=timeframe,
            data_available=data_available,
            annotated_series=[
                AnnotatedPointDTO.from_point(point) for point in result.annotated_series
            ],
            latest=(
                LatestPointDTO.from_summary(result.latest) if result.latest else None
            ),
            alerts=[AlertDTO.from_domain(alert) for alert in result.alerts],
            slope=result.slope,
            seasonal_factor=result.seasonal_factor,
            next_predicted_fouling_resistance=result.next_predicted_fouling_resistance,
            dropped_records=result.dropped_records,
        )


class ReadingsResponseDTO(BaseModel):
    """Raw readings of the requested timeframe."""

    timeframe: Timeframe
    readings: List[ReadingDTO] = Field(default_factory=list)
    dropped_records: int = Field(default=0, ge=0)
