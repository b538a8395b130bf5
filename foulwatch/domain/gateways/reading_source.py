"""
Domain Gateway - Reading Source

Interface of the plant historian that delivers heat-exchanger readings.
"""

from abc import ABC, abstractmethod

from foulwatch.domain.entities.reading import ParsedReadings, Timeframe


class IReadingSource(ABC):
    """Interface for fetching condenser readings."""

    @abstractmethod
    async def fetch_readings(self, timeframe_hint: Timeframe) -> ParsedReadings:
        """
        Fetch the readings needed to analyse ``timeframe_hint``.

        Implementations may return more history than the hint asks for
        (the seasonal adjustment needs last year's data) and must report
        malformed records through ``ParsedReadings.dropped``.

        Args:
            timeframe_hint: The lookback window the caller will analyse.

        Returns:
            Parsed readings in any order and the count of rejected records.

        Raises:
            ReadingSourceError: When the source is unreachable or its
                response cannot be parsed.
        """
        pass
