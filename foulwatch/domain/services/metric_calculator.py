"""
Domain Service - Metric Calculator

Thermal, financial and environmental metrics derived from a reading.
Every consumer (pipeline, alerting, presentation) goes through these
functions so the cost model has a single definition.
"""

from foulwatch.domain.entities.errors import ConfigurationError
from foulwatch.domain.entities.reading import CostBreakdown

# tons of coal per MWh of lost heat
COAL_TONS_PER_MWH = 0.36
# kg CO2 per kg of coal burned
CO2_FACTOR = 2.86
MAINTENANCE_COST_FACTOR = 0.15
EFFICIENCY_LOSS_FACTOR = 0.08
ENVIRONMENTAL_COST_FACTOR = 0.02


def thermal_efficiency(fouled_u: float, clean_u: float) -> float:
    """Fouled over clean heat transfer coefficient, as a percentage.

    Raises:
        ConfigurationError: If the clean baseline is zero.
    """
    if clean_u == 0:
        raise ConfigurationError(
            "Clean heat transfer coefficient must not be zero",
            details={"clean_u": clean_u},
        )
    return 100.0 * fouled_u / clean_u


def energy_loss_kw(clean_u: float, fouled_u: float, area: float, lmtd: float) -> float:
    """Heat duty lost to fouling, Q = ΔU·A·LMTD, in kW."""
    return (clean_u - fouled_u) * area * lmtd / 1000.0


def daily_cost(energy_loss: float, energy_rate: float, hours: float) -> float:
    return energy_loss * energy_rate * hours


def coal_consumption_tons_per_day(energy_loss: float, hours: float) -> float:
    return energy_loss * hours * COAL_TONS_PER_MWH / 1000.0


def co2_emissions_kg_per_day(coal_tons: float) -> float:
    return coal_tons * CO2_FACTOR


def cost_breakdown(
    energy_cost: float, coal_tons: float, coal_price: float
) -> CostBreakdown:
    """Split the daily cost of fouling into its four components."""
    return CostBreakdown(
        energy_cost=energy_cost,
        maintenance_cost=energy_cost * MAINTENANCE_COST_FACTOR,
        efficiency_loss_cost=energy_cost * EFFICIENCY_LOSS_FACTOR,
        environmental_cost=coal_tons * coal_price * ENVIRONMENTAL_COST_FACTOR,
    )
