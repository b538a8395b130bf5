"""Domain entities for condenser sensor readings and their derived values."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import List, Optional


class Timeframe(str, Enum):
    """Trailing lookback window relative to the latest reading."""

    LAST_24_HOURS = "24h"
    LAST_7_DAYS = "7d"
    LAST_30_DAYS = "30d"

    @property
    def window(self) -> timedelta:
        return _TIMEFRAME_WINDOWS[self]


_TIMEFRAME_WINDOWS = {
    Timeframe.LAST_24_HOURS: timedelta(days=1),
    Timeframe.LAST_7_DAYS: timedelta(days=7),
    Timeframe.LAST_30_DAYS: timedelta(days=30),
}


@dataclass(frozen=True, slots=True)
class Reading:
    """A single timestamped heat-exchanger sample.

    Units follow the plant historian: pressure in bar, temperatures in °C,
    mass flow in kg/h, Cp in kJ/kg·K, U values in W/m²K and fouling
    resistance in m²K/W. ``fouled_u > clean_u`` or a negative resistance
    are kept as-is.
    """

    timestamp: datetime
    saturation_pressure: float
    saturation_temperature: float
    lmtd: float
    cooling_water_in_temp: float
    cooling_water_out_temp: float
    cooling_water_mass_flow: float
    specific_heat_capacity: float
    fouled_u: float
    clean_u: float
    fouling_resistance: float


@dataclass(frozen=True, slots=True)
class AnnotatedPoint:
    """A reading with the metrics and forecast computed for it."""

    reading: Reading
    efficiency_percent: float
    energy_loss_kw: float
    predicted_fouling_resistance: float

    @property
    def timestamp(self) -> datetime:
        return self.reading.timestamp

    @property
    def actual_fouling_resistance(self) -> float:
        return self.reading.fouling_resistance


@dataclass(frozen=True, slots=True)
class CostBreakdown:
    """Daily cost split attributed to fouling, in the deployment currency."""

    energy_cost: float
    maintenance_cost: float
    efficiency_loss_cost: float
    environmental_cost: float

    @property
    def total_cost(self) -> float:
        return (
            self.energy_cost
            + self.maintenance_cost
            + self.efficiency_loss_cost
            + self.environmental_cost
        )


class AlertSeverity(str, Enum):
    CRITICAL = "CRITICAL"
    PERFORMANCE = "PERFORMANCE"
    COST = "COST"
    ENVIRONMENTAL = "ENVIRONMENTAL"


@dataclass(frozen=True, slots=True)
class Alert:
    severity: AlertSeverity
    message: str


class GaugeState(str, Enum):
    GOOD = "good"
    WARNING = "warning"
    CRITICAL = "critical"


@dataclass(frozen=True, slots=True)
class ProcessStatus:
    """Operating status of one live process parameter."""

    name: str
    value: float
    unit: str
    minimum: float
    maximum: float
    target: float
    state: GaugeState


@dataclass(frozen=True, slots=True)
class LatestSummary:
    """The most recent annotated point with its cost and emission figures."""

    point: AnnotatedPoint
    costs: CostBreakdown
    coal_tons_per_day: float
    co2_kg_per_day: float
    process_statuses: List[ProcessStatus] = field(default_factory=list)

    @property
    def daily_cost(self) -> float:
        return self.costs.energy_cost


@dataclass(frozen=True, slots=True)
class ParsedReadings:
    """Readings accepted from a source batch and the count of rejected records."""

    readings: List[Reading] = field(default_factory=list)
    dropped: int = 0


@dataclass(frozen=True, slots=True)
class ForecastResult:
    """Output of one forecast pipeline run."""

    annotated_series: List[AnnotatedPoint] = field(default_factory=list)
    latest: Optional[LatestSummary] = None
    alerts: List[Alert] = field(default_factory=list)
    slope: float = 0.0
    seasonal_factor: float = 1.0
    next_predicted_fouling_resistance: Optional[float] = None
    dropped_records: int = 0

    @classmethod
    def empty(cls, dropped_records: int = 0) -> "ForecastResult":
        return cls(dropped_records=dropped_records)
