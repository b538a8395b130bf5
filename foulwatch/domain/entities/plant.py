"""Plant parameters and alerting thresholds supplied per deployment."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class AlertThresholds:
    """Cut-offs for the operational alert rules.

    Deployments disagree on these (e.g. a critical resistance of 0.00026
    against 0.00076, an efficiency floor of 85 % against 75 %), so none
    of them is fixed in the evaluator.
    """

    critical_fouling_resistance: float = 0.00026
    min_efficiency_percent: float = 85.0
    max_daily_cost: float = 5000.0
    max_co2_kg_per_day: float = 50.0


@dataclass(frozen=True, slots=True)
class GaugeLimits:
    """Limits for the live process parameter gauges."""

    max_cooling_water_in_temp: float = 35.0
    max_cooling_water_out_temp: float = 50.0
    min_lmtd: float = 12.0
    max_saturation_pressure_mbar: float = 160.0


@dataclass(frozen=True, slots=True)
class PlantConfiguration:
    """Physical and financial constants of one condenser installation."""

    clean_u: float = 2500.0
    area: float = 44370.0
    energy_rate: float = 0.12
    operating_hours: float = 24.0
    coal_price: float = 5000.0
    currency_symbol: str = "₹"
    trend_window: int = 24
    seasonal_adjustment: bool = True
    thresholds: AlertThresholds = field(default_factory=AlertThresholds)
    gauges: GaugeLimits = field(default_factory=GaugeLimits)
