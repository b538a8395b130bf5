"""
Domain Service - Reading Parser

Turns raw source records into Reading entities. A record missing a
required value is rejected on its own; the rest of the batch survives and
the number of rejected records is reported back.
"""

import math
import re
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Mapping, Tuple

import structlog

from foulwatch.domain.entities.errors import MalformedReadingError
from foulwatch.domain.entities.reading import ParsedReadings, Reading

logger = structlog.get_logger(__name__)

# Reading field -> accepted record keys, historian column names first
FIELD_ALIASES: Dict[str, Tuple[str, ...]] = {
    "timestamp": ("Timestamp", "_time", "timestamp"),
    "saturation_pressure": ("Psat", "saturation_pressure"),
    "saturation_temperature": ("Tsat", "saturation_temperature"),
    "lmtd": ("LMTD", "lmtd"),
    "cooling_water_in_temp": ("Tcw in", "cooling_water_in_temp"),
    "cooling_water_out_temp": ("Tcw out", "cooling_water_out_temp"),
    "cooling_water_mass_flow": ("mcw", "Mcw", "cooling_water_mass_flow"),
    "specific_heat_capacity": ("Cpw", "specific_heat_capacity"),
    "fouled_u": ("Ufoul", "fouled_u"),
    "clean_u": ("Uclean", "clean_u"),
    "fouling_resistance": ("Rfoul", "fouling_resistance"),
}

# RFC3339Nano trims trailing zeros; fromisoformat on 3.10 wants 3 or 6 digits
_FRACTION = re.compile(r"\.(\d+)")


def _six_digit_fraction(match: "re.Match[str]") -> str:
    return "." + (match.group(1) + "000000")[:6]


def _lookup(record: Mapping[str, Any], field_name: str) -> Any:
    for key in FIELD_ALIASES[field_name]:
        if key in record and record[key] not in (None, ""):
            return record[key]
    raise MalformedReadingError(field_name, None)


def _parse_timestamp(value: Any) -> datetime:
    if isinstance(value, datetime):
        timestamp = value
    elif isinstance(value, str):
        text = _FRACTION.sub(_six_digit_fraction, value.strip())
        text = text.replace("Z", "+00:00")
        try:
            timestamp = datetime.fromisoformat(text)
        except ValueError as exc:
            raise MalformedReadingError("timestamp", value) from exc
    else:
        raise MalformedReadingError("timestamp", value)

    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=timezone.utc)
    return timestamp


def _parse_number(field_name: str, value: Any) -> float:
    if isinstance(value, bool):
        raise MalformedReadingError(field_name, value)
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise MalformedReadingError(field_name, value) from exc
    if not math.isfinite(number):
        raise MalformedReadingError(field_name, value)
    return number


def parse_reading(record: Mapping[str, Any]) -> Reading:
    """Build a Reading from one record.

    Raises:
        MalformedReadingError: If a field is missing, non-numeric or not finite.
    """
    values: Dict[str, Any] = {
        "timestamp": _parse_timestamp(_lookup(record, "timestamp"))
    }
    for field_name in FIELD_ALIASES:
        if field_name == "timestamp":
            continue
        values[field_name] = _parse_number(field_name, _lookup(record, field_name))
    return Reading(**values)


def parse_readings(records: Iterable[Mapping[str, Any]]) -> ParsedReadings:
    """Parse a batch, skipping and counting malformed records."""
    readings: List[Reading] = []
    dropped = 0

    for index, record in enumerate(records):
        try:
            readings.append(parse_reading(record))
        except MalformedReadingError as exc:
            dropped += 1
            logger.warning(
                "reading_parser.record_dropped",
                index=index,
                field=exc.field_name,
                value=repr(exc.value),
            )

    if dropped:
        logger.info(
            "reading_parser.batch_parsed",
            accepted=len(readings),
            dropped=dropped,
        )
    return ParsedReadings(readings=readings, dropped=dropped)
