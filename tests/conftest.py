from __future__ import annotations

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Callable, Dict, List, Sequence

import pytest

from foulwatch.domain.entities.plant import PlantConfiguration
from foulwatch.domain.entities.reading import ParsedReadings, Reading, Timeframe
from foulwatch.domain.gateways.reading_source import IReadingSource

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

BASE_TIME = datetime(2025, 3, 1, tzinfo=timezone.utc)


def make_reading(
    timestamp: datetime = BASE_TIME,
    fouling_resistance: float = 0.000025,
    fouled_u: float = 2300.0,
    lmtd: float = 14.0,
    **overrides: Any,
) -> Reading:
    values: Dict[str, Any] = {
        "timestamp": timestamp,
        "saturation_pressure": 0.153,
        "saturation_temperature": 52.0,
        "lmtd": lmtd,
        "cooling_water_in_temp": 29.0,
        "cooling_water_out_temp": 45.0,
        "cooling_water_mass_flow": 22000.0,
        "specific_heat_capacity": 4.14,
        "fouled_u": fouled_u,
        "clean_u": 2500.0,
        "fouling_resistance": fouling_resistance,
    }
    values.update(overrides)
    return Reading(**values)


def hourly_series(
    values: Sequence[float],
    start: datetime = BASE_TIME,
    step: timedelta = timedelta(hours=1),
    **overrides: Any,
) -> List[Reading]:
    return [
        make_reading(
            timestamp=start + index * step, fouling_resistance=value, **overrides
        )
        for index, value in enumerate(values)
    ]


def linear_values(start: float, end: float, count: int) -> List[float]:
    step = (end - start) / (count - 1)
    return [start + step * index for index in range(count)]


def raw_record(**overrides: Any) -> Dict[str, Any]:
    """A source record keyed by the historian column names."""
    record: Dict[str, Any] = {
        "_time": "2025-03-01T00:00:00Z",
        "Psat": "0.153",
        "Tsat": "52.1",
        "LMTD": "14.2",
        "Tcw in": "29.5",
        "Tcw out": "45.3",
        "mcw": "22000",
        "Cpw": "4.14",
        "Ufoul": "2350",
        "Uclean": "2500",
        "Rfoul": "0.000027",
    }
    record.update(overrides)
    return record


class FakeReadingSource(IReadingSource):
    def __init__(
        self,
        readings: Sequence[Reading] = (),
        dropped: int = 0,
        error: Exception | None = None,
    ) -> None:
        self.readings = list(readings)
        self.dropped = dropped
        self.error = error
        self.requested: List[Timeframe] = []

    async def fetch_readings(self, timeframe_hint: Timeframe) -> ParsedReadings:
        self.requested.append(timeframe_hint)
        if self.error is not None:
            raise self.error
        return ParsedReadings(readings=list(self.readings), dropped=self.dropped)


@pytest.fixture()
def plant_config() -> PlantConfiguration:
    return PlantConfiguration()


@pytest.fixture()
def reading_factory() -> Callable[..., Reading]:
    return make_reading
