"""Domain Service - live process parameter gauges for the latest reading."""

from typing import List

from foulwatch.domain.entities.plant import GaugeLimits
from foulwatch.domain.entities.reading import GaugeState, ProcessStatus, Reading


def evaluate_process_status(
    reading: Reading, limits: GaugeLimits
) -> List[ProcessStatus]:
    """Classify cooling water temperatures, LMTD and saturation pressure."""
    pressure_mbar = reading.saturation_pressure * 1000.0

    return [
        ProcessStatus(
            name="cooling_water_in_temp",
            value=reading.cooling_water_in_temp,
            unit="°C",
            minimum=20.0,
            maximum=40.0,
            target=30.0,
            state=(
                GaugeState.WARNING
                if reading.cooling_water_in_temp > limits.max_cooling_water_in_temp
                else GaugeState.GOOD
            ),
        ),
        ProcessStatus(
            name="cooling_water_out_temp",
            value=reading.cooling_water_out_temp,
            unit="°C",
            minimum=35.0,
            maximum=55.0,
            target=45.0,
            state=(
                GaugeState.WARNING
                if reading.cooling_water_out_temp > limits.max_cooling_water_out_temp
                else GaugeState.GOOD
            ),
        ),
        ProcessStatus(
            name="lmtd",
            value=reading.lmtd,
            unit="°C",
            minimum=10.0,
            maximum=20.0,
            target=15.0,
            state=(
                GaugeState.CRITICAL
                if reading.lmtd < limits.min_lmtd
                else GaugeState.GOOD
            ),
        ),
        ProcessStatus(
            name="saturation_pressure",
            value=pressure_mbar,
            unit="mbar",
            minimum=100.0,
            maximum=200.0,
            target=150.0,
            state=(
                GaugeState.WARNING
                if pressure_mbar > limits.max_saturation_pressure_mbar
                else GaugeState.GOOD
            ),
        ),
    ]
