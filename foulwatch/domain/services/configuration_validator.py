"""Domain service helpers for validating plant configurations."""

import math
from typing import List

from foulwatch.domain.entities.errors import ConfigurationError
from foulwatch.domain.entities.plant import AlertThresholds, PlantConfiguration


def _is_number(value: float) -> bool:
    return isinstance(value, (int, float)) and math.isfinite(value)


def _validate_thresholds(thresholds: AlertThresholds, errors: List[str]) -> None:
    for name in (
        "critical_fouling_resistance",
        "min_efficiency_percent",
        "max_daily_cost",
        "max_co2_kg_per_day",
    ):
        value = getattr(thresholds, name)
        if not _is_number(value):
            errors.append(f"Alert threshold '{name}' must be a finite number.")
        elif value < 0:
            errors.append(f"Alert threshold '{name}' must not be negative.")


def validate_plant_configuration(config: PlantConfiguration) -> None:
    """Validate a plant configuration before any pipeline is built.

    Raises:
        ConfigurationError: If one or more validation rules fail.
    """

    errors: List[str] = []

    if not _is_number(config.clean_u) or config.clean_u <= 0:
        errors.append("Clean heat transfer coefficient must be greater than 0.")
    if not _is_number(config.area) or config.area <= 0:
        errors.append("Condenser area must be greater than 0.")
    if not _is_number(config.energy_rate) or config.energy_rate < 0:
        errors.append("Energy rate must not be negative.")
    if not _is_number(config.operating_hours) or not (
        0 < config.operating_hours <= 24
    ):
        errors.append("Operating hours must be greater than 0 and at most 24.")
    if not _is_number(config.coal_price) or config.coal_price < 0:
        errors.append("Coal price must not be negative.")
    if config.trend_window < 2:
        errors.append("Trend window must cover at least 2 readings.")

    _validate_thresholds(config.thresholds, errors)

    if errors:
        raise ConfigurationError(
            "Invalid plant configuration", details={"errors": errors}
        )
