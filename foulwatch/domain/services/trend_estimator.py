"""
Domain Service - Trend Estimator

Ordinary least squares slope of the fouling resistance against the sample
index over the most recent readings. The index is the regressor, so the
slope is expressed per sample; irregular sampling gaps are not corrected.
"""

import math
from typing import Sequence

import numpy as np

from foulwatch.domain.entities.reading import Reading

DEFAULT_TREND_WINDOW = 24


def ols_slope(values: Sequence[float]) -> float:
    """Slope of ``values`` against ``0..n-1``.

    ``(n·Σ(i·y) − Σi·Σy) / (n·Σi² − (Σi)²)``; 0.0 for fewer than two
    values or a non-finite result.
    """
    n = len(values)
    if n <= 1:
        return 0.0

    y = np.asarray(values, dtype=np.float64)
    # the slope is invariant to a constant offset; a flat series yields 0.0 exactly
    y = y - y[0]
    x = np.arange(n, dtype=np.float64)

    sum_x = x.sum()
    sum_y = y.sum()
    sum_xy = float(np.dot(x, y))
    sum_x2 = float(np.dot(x, x))

    with np.errstate(divide="ignore", invalid="ignore"):
        slope = np.float64(n * sum_xy - sum_x * sum_y) / np.float64(
            n * sum_x2 - sum_x * sum_x
        )

    slope = float(slope)
    if not math.isfinite(slope):
        return 0.0
    return slope


def estimate_slope(
    readings: Sequence[Reading], window: int = DEFAULT_TREND_WINDOW
) -> float:
    """Fouling resistance slope over the last ``min(window, len(readings))`` points."""
    recent = readings[-window:] if window > 0 else []
    return ols_slope([reading.fouling_resistance for reading in recent])
