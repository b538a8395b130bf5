"""Domain Service - operational alert rules over the latest pipeline point."""

from typing import List

from foulwatch.domain.entities.plant import AlertThresholds
from foulwatch.domain.entities.reading import Alert, AlertSeverity, LatestSummary


def evaluate_alerts(
    latest: LatestSummary, thresholds: AlertThresholds, currency_symbol: str = "₹"
) -> List[Alert]:
    """Evaluate every rule independently, in a fixed order.

    Each rule fires at most once per call. Nothing is remembered between
    calls; suppressing repeats is up to the caller.
    """
    alerts: List[Alert] = []
    point = latest.point
    fouling_resistance = point.actual_fouling_resistance

    if fouling_resistance > thresholds.critical_fouling_resistance:
        alerts.append(
            Alert(
                severity=AlertSeverity.CRITICAL,
                message=(
                    f"CRITICAL: Fouling Resistance "
                    f"({fouling_resistance * 1_000_000:.1f}×10⁻⁶) "
                    f"has exceeded the threshold."
                ),
            )
        )

    if point.efficiency_percent < thresholds.min_efficiency_percent:
        alerts.append(
            Alert(
                severity=AlertSeverity.PERFORMANCE,
                message=(
                    f"PERFORMANCE: Efficiency ({point.efficiency_percent:.1f}%) "
                    f"is below the {thresholds.min_efficiency_percent:g}% target."
                ),
            )
        )

    if latest.daily_cost > thresholds.max_daily_cost:
        alerts.append(
            Alert(
                severity=AlertSeverity.COST,
                message=(
                    f"COST: Daily energy cost ({currency_symbol}"
                    f"{latest.daily_cost:.0f}) exceeds budget threshold."
                ),
            )
        )

    if latest.co2_kg_per_day > thresholds.max_co2_kg_per_day:
        alerts.append(
            Alert(
                severity=AlertSeverity.ENVIRONMENTAL,
                message=(
                    f"ENVIRONMENTAL: CO₂ emissions ({latest.co2_kg_per_day:.0f} "
                    f"kg/day) above normal levels."
                ),
            )
        )

    return alerts
