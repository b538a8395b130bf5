"""
Domain Service - Seasonal Adjuster

Bounded year-over-year correction of the trend forecast. The mean fouling
resistance of the 24 hours ending at the reference instant is compared
with the same calendar window one year earlier.
"""

import math
from datetime import datetime, timedelta
from typing import Iterable, Optional, Sequence

import structlog

from foulwatch.domain.entities.reading import Reading

logger = structlog.get_logger(__name__)

COMPARISON_WINDOW = timedelta(hours=24)
MIN_BASELINE = 1e-7
MIN_FACTOR = 0.8
MAX_FACTOR = 1.2
NEUTRAL_FACTOR = 1.0


def one_year_earlier(instant: datetime) -> datetime:
    """Same month, day and time one calendar year back; Feb 29 maps to Feb 28."""
    try:
        return instant.replace(year=instant.year - 1)
    except ValueError:
        return instant.replace(year=instant.year - 1, day=28)


def window_mean(
    readings: Iterable[Reading], start: datetime, end: datetime
) -> Optional[float]:
    """Mean fouling resistance of readings in ``(start, end]``, None if empty."""
    values = [
        reading.fouling_resistance
        for reading in readings
        if start < reading.timestamp <= end
    ]
    if not values:
        return None
    return math.fsum(values) / len(values)


def seasonal_factor(
    history: Sequence[Reading], reference_time: Optional[datetime] = None
) -> float:
    """Return the year-over-year factor, clamped to ``[0.8, 1.2]``.

    Args:
        history: The full, unfiltered reading dataset.
        reference_time: End of the current window; defaults to the latest
            timestamp in ``history``.

    Returns:
        1.0 when either window holds no reading, when last year's mean is
        below 1e-7 or when the ratio is not finite.
    """
    if not history:
        return NEUTRAL_FACTOR

    end = reference_time or max(reading.timestamp for reading in history)
    avg_current = window_mean(history, end - COMPARISON_WINDOW, end)

    last_year_end = one_year_earlier(end)
    avg_last_year = window_mean(
        history, last_year_end - COMPARISON_WINDOW, last_year_end
    )

    if avg_current is None or avg_last_year is None:
        logger.debug(
            "seasonal_adjuster.window_empty",
            current_empty=avg_current is None,
            last_year_empty=avg_last_year is None,
        )
        return NEUTRAL_FACTOR
    if avg_last_year < MIN_BASELINE:
        return NEUTRAL_FACTOR

    raw_factor = avg_current / avg_last_year
    if not math.isfinite(raw_factor):
        return NEUTRAL_FACTOR

    factor = min(max(raw_factor, MIN_FACTOR), MAX_FACTOR)
    logger.debug(
        "seasonal_adjuster.factor_computed",
        avg_current=avg_current,
        avg_last_year=avg_last_year,
        raw_factor=raw_factor,
        factor=factor,
    )
    return factor
