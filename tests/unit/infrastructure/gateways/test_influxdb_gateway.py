from __future__ import annotations

import asyncio
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from typing import Any, Dict, List

import aiohttp
import pytest
from influxdb_client.client.flux_csv_parser import FluxQueryException
from influxdb_client.rest import ApiException

from foulwatch.domain.entities.errors import DataUnavailableError
from foulwatch.domain.entities.reading import Timeframe
from foulwatch.infrastructure.gateways.influxdb_gateway import (
    InfluxDBReadingGateway,
    ReadingSourceError,
)

GATEWAY_MODULE = "foulwatch.infrastructure.gateways.influxdb_gateway"
START = datetime(2025, 3, 1, tzinfo=timezone.utc)


def _values(hour: int, rfoul: Any = 0.000027) -> Dict[str, Any]:
    # shape of a pivoted FluxRecord.values
    return {
        "result": "_result",
        "table": 0,
        "_time": START + timedelta(hours=hour),
        "Psat": 0.153,
        "Tsat": 52.1,
        "LMTD": 14.2,
        "Tcw in": 29.5,
        "Tcw out": 45.3,
        "mcw": 22000.0,
        "Cpw": 4.14,
        "Ufoul": 2350.0,
        "Uclean": 2500.0,
        "Rfoul": rfoul,
    }


def _table(*rows: Dict[str, Any]) -> SimpleNamespace:
    return SimpleNamespace(records=[SimpleNamespace(values=row) for row in rows])


class _StubQueryApi:
    def __init__(self, client: "_StubInfluxClient") -> None:
        self._client = client

    async def query(self, query: str, org: str | None = None) -> List[SimpleNamespace]:
        self._client.queries.append((query, org))
        if self._client.error is not None:
            raise self._client.error
        return self._client.tables


class _StubInfluxClient:
    def __init__(
        self,
        tables: List[SimpleNamespace] | None = None,
        error: Exception | None = None,
    ) -> None:
        self.tables = tables or []
        self.error = error
        self.options: Dict[str, Any] = {}
        self.queries: list = []
        self.closed = False

    def __call__(self, **options: Any) -> "_StubInfluxClient":
        self.options = options
        return self

    async def __aenter__(self) -> "_StubInfluxClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.closed = True

    def query_api(self) -> _StubQueryApi:
        return _StubQueryApi(self)


def _install(monkeypatch, client: _StubInfluxClient) -> _StubInfluxClient:
    monkeypatch.setattr(f"{GATEWAY_MODULE}.InfluxDBClientAsync", client)
    return client


def _gateway() -> InfluxDBReadingGateway:
    return InfluxDBReadingGateway(
        url="http://influx/",
        token="t0ken",
        org="plant",
        bucket="condenser",
        timeout=12.5,
    )


@pytest.mark.asyncio
async def test_fetch_readings_parses_pivoted_records(monkeypatch) -> None:
    client = _install(
        monkeypatch,
        _StubInfluxClient(tables=[_table(_values(0), _values(1, rfoul=0.000028))]),
    )

    parsed = await _gateway().fetch_readings(Timeframe.LAST_24_HOURS)

    assert parsed.dropped == 0
    assert [r.fouling_resistance for r in parsed.readings] == [0.000027, 0.000028]
    assert parsed.readings[1].timestamp == START + timedelta(hours=1)

    assert client.options == {
        "url": "http://influx",
        "token": "t0ken",
        "org": "plant",
        "timeout": 12500,
    }
    query, org = client.queries[0]
    assert org == "plant"
    assert 'from(bucket: "condenser")' in query
    assert client.closed


@pytest.mark.asyncio
async def test_fetch_readings_flattens_tables_and_counts_bad_records(
    monkeypatch,
) -> None:
    _install(
        monkeypatch,
        _StubInfluxClient(
            tables=[_table(_values(0)), _table(_values(1, rfoul=None), _values(2))]
        ),
    )

    parsed = await _gateway().fetch_readings(Timeframe.LAST_7_DAYS)

    assert len(parsed.readings) == 2
    assert parsed.dropped == 1


@pytest.mark.parametrize(
    "error, fragment",
    [
        (ApiException(status=401, reason="Unauthorized"), "401"),
        (
            FluxQueryException(message="bucket not found", reference=897),
            "bucket not found",
        ),
        (aiohttp.ClientConnectionError("connection refused"), "request failed"),
        (asyncio.TimeoutError(), "request failed"),
        (RuntimeError("boom"), "unexpected"),
    ],
)
@pytest.mark.asyncio
async def test_client_failures_raise_reading_source_error(
    monkeypatch, error, fragment
) -> None:
    _install(monkeypatch, _StubInfluxClient(error=error))

    with pytest.raises(ReadingSourceError) as exc_info:
        await _gateway().fetch_readings(Timeframe.LAST_24_HOURS)

    assert isinstance(exc_info.value, DataUnavailableError)
    assert fragment in exc_info.value.message
    assert exc_info.value.__cause__ is error




def test_query_covers_last_year_window() -> None:
    gateway = _gateway()

    query = gateway.build_query(Timeframe.LAST_30_DAYS)

    assert 'from(bucket: "condenser")' in query
    assert "range(start: -400d)" in query
    assert 'r._measurement == "heat_exchanger"' in query
    assert '"Tcw in"' in query


def test_query_honours_longer_timeframe() -> None:
    gateway = InfluxDBReadingGateway(
        url="http://influx", token="", org="o", bucket="b", history_days=3
    )
    assert "range(start: -7d)" in gateway.build_query(Timeframe.LAST_7_DAYS)
