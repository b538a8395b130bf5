"""Domain Service - trailing timeframe selection."""

from typing import Iterable, List

from foulwatch.domain.entities.reading import Reading, Timeframe


def filter_timeframe(
    readings: Iterable[Reading], timeframe: Timeframe
) -> List[Reading]:
    """Return readings newer than ``latest - timeframe.window``.

    The reference instant is the latest timestamp in the data, not the
    wall clock, and the input order is preserved.
    """
    items = list(readings)
    if not items:
        return []

    latest = max(reading.timestamp for reading in items)
    cutoff = latest - timeframe.window
    return [reading for reading in items if reading.timestamp > cutoff]
