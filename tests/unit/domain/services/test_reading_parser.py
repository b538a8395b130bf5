from __future__ import annotations

from datetime import datetime, timezone

import pytest

from foulwatch.domain.entities.errors import MalformedReadingError
from foulwatch.domain.services.reading_parser import parse_reading, parse_readings
from tests.conftest import raw_record


def test_historian_record_is_parsed() -> None:
    reading = parse_reading(raw_record())

    assert reading.timestamp == datetime(2025, 3, 1, tzinfo=timezone.utc)
    assert reading.saturation_pressure == pytest.approx(0.153)
    assert reading.cooling_water_in_temp == pytest.approx(29.5)
    assert reading.cooling_water_out_temp == pytest.approx(45.3)
    assert reading.fouled_u == pytest.approx(2350.0)
    assert reading.fouling_resistance == pytest.approx(0.000027)


def test_spreadsheet_style_keys_are_accepted() -> None:
    record = raw_record(Timestamp="2025-03-01 06:30:00", Mcw="21000")
    del record["_time"]
    del record["mcw"]

    reading = parse_reading(record)

    assert reading.timestamp == datetime(2025, 3, 1, 6, 30, tzinfo=timezone.utc)
    assert reading.cooling_water_mass_flow == pytest.approx(21000.0)


def test_nanosecond_timestamps_are_truncated() -> None:
    reading = parse_reading(raw_record(_time="2025-03-01T00:00:00.123456789Z"))
    assert reading.timestamp.microsecond == 123456


@pytest.mark.parametrize(
    "value, microsecond",
    [
        ("2024-01-01T00:00:00.5Z", 500000),
        ("2024-01-01T00:00:00.12Z", 120000),
        ("2024-01-01T00:00:00.0004Z", 400),
    ],
)
def test_trimmed_fractional_seconds_are_padded(value, microsecond) -> None:
    parsed = parse_readings([raw_record(_time=value)])

    assert parsed.dropped == 0
    assert parsed.readings[0].timestamp == datetime(
        2024, 1, 1, microsecond=microsecond, tzinfo=timezone.utc
    )


def test_historian_datetimes_are_used_as_is() -> None:
    moment = datetime(2024, 1, 1, 0, 0, 0, 500000, tzinfo=timezone.utc)
    assert parse_reading(raw_record(_time=moment)).timestamp == moment


def test_offset_timestamps_keep_their_zone() -> None:
    reading = parse_reading(raw_record(_time="2025-03-01T05:30:00+05:30"))
    assert reading.timestamp == datetime(2025, 3, 1, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "overrides, field_name",
    [
        ({"Rfoul": ""}, "fouling_resistance"),
        ({"Ufoul": "n/a"}, "fouled_u"),
        ({"LMTD": "nan"}, "lmtd"),
        ({"Psat": True}, "saturation_pressure"),
        ({"_time": "yesterday"}, "timestamp"),
    ],
)
def test_malformed_fields_are_rejected(overrides, field_name) -> None:
    with pytest.raises(MalformedReadingError) as exc_info:
        parse_reading(raw_record(**overrides))

    assert exc_info.value.field_name == field_name


def test_batch_skips_and_counts_malformed_records() -> None:
    records = [
        raw_record(),
        raw_record(_time="2025-03-01T01:00:00Z", Rfoul=None),
        raw_record(_time="2025-03-01T02:00:00Z"),
    ]

    parsed = parse_readings(records)

    assert len(parsed.readings) == 2
    assert parsed.dropped == 1
    assert [r.timestamp.hour for r in parsed.readings] == [0, 2]
