"""
Infrastructure Gateway - InfluxDB Implementation

Reads condenser samples from an InfluxDB v2 bucket with the async
``influxdb_client``. The Flux query pivots the ``heat_exchanger``
measurement so that each record holds one complete reading.
"""

import asyncio
from typing import Any, Dict, Iterable, List

import aiohttp
import structlog
from influxdb_client.client.flux_csv_parser import FluxQueryException
from influxdb_client.client.flux_table import FluxTable
from influxdb_client.client.influxdb_client_async import InfluxDBClientAsync
from influxdb_client.rest import ApiException

from foulwatch.domain.entities.errors import DataUnavailableError
from foulwatch.domain.entities.reading import ParsedReadings, Timeframe
from foulwatch.domain.gateways.reading_source import IReadingSource
from foulwatch.domain.services.reading_parser import parse_readings

logger = structlog.get_logger(__name__)

READING_COLUMNS = (
    "Psat",
    "Tsat",
    "LMTD",
    "Tcw in",
    "Tcw out",
    "mcw",
    "Cpw",
    "Ufoul",
    "Uclean",
    "Rfoul",
)


class ReadingSourceError(DataUnavailableError):
    """Exception raised when InfluxDB operations fail."""

    pass


class InfluxDBReadingGateway(IReadingSource):
    """Reading source backed by the async InfluxDB v2 client."""

    def __init__(
        self,
        url: str,
        token: str,
        org: str,
        bucket: str,
        measurement: str = "heat_exchanger",
        history_days: int = 400,
        timeout: float = 30.0,
    ):
        """
        Initialize the InfluxDB gateway.

        Args:
            url: Base URL of InfluxDB (e.g., "http://influxdb:8086")
            token: API token with read access to the bucket
            org: Organization owning the bucket
            bucket: Bucket holding the condenser measurement
            measurement: Measurement name of the heat exchanger samples
            history_days: Minimum history to fetch so last year's window
                is available for the seasonal adjustment
            timeout: Request timeout in seconds
        """
        self.url = url.rstrip("/")
        self.token = token
        self.org = org
        self.bucket = bucket
        self.measurement = measurement
        self.history_days = history_days
        self.timeout = timeout

    def build_query(self, timeframe_hint: Timeframe) -> str:
        days = max(timeframe_hint.window.days, self.history_days)
        columns = ", ".join(f'"{column}"' for column in ("_time",) + READING_COLUMNS)
        return (
            f'from(bucket: "{self.bucket}")\n'
            f"  |> range(start: -{days}d)\n"
            f'  |> filter(fn: (r) => r._measurement == "{self.measurement}")\n'
            f'  |> pivot(rowKey: ["_time"], columnKey: ["_field"], '
            f'valueColumn: "_value")\n'
            f"  |> keep(columns: [{columns}])\n"
            f'  |> sort(columns: ["_time"])'
        )

    async def fetch_readings(self, timeframe_hint: Timeframe) -> ParsedReadings:
        """Query InfluxDB and parse the pivoted Flux records into readings."""

        query = self.build_query(timeframe_hint)

        logger.info(
            "influxdb.query_started",
            url=self.url,
            bucket=self.bucket,
            measurement=self.measurement,
            timeframe=timeframe_hint.value,
        )

        try:
            async with InfluxDBClientAsync(
                url=self.url,
                token=self.token,
                org=self.org,
                timeout=int(self.timeout * 1000),
            ) as client:
                tables = await client.query_api().query(query, org=self.org)
                records = self._flatten(tables)

        except ApiException as e:
            logger.error(
                "influxdb.http_error",
                status_code=e.status,
                reason=e.reason,
                url=self.url,
            )
            raise ReadingSourceError(
                f"InfluxDB HTTP error {e.status}: {e.reason}"
            ) from e

        except FluxQueryException as e:
            logger.error(
                "influxdb.query_failed",
                error=e.message,
                reference=e.reference,
                url=self.url,
            )
            raise ReadingSourceError(f"InfluxDB query failed: {e.message}") from e

        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error("influxdb.request_error", error=str(e), url=self.url)
            raise ReadingSourceError(f"InfluxDB request failed: {str(e)}") from e

        except Exception as e:
            logger.error("influxdb.unexpected_error", error=str(e), url=self.url)
            raise ReadingSourceError(f"InfluxDB unexpected error: {str(e)}") from e

        parsed = parse_readings(records)
        logger.info(
            "influxdb.readings_fetched",
            count=len(parsed.readings),
            dropped=parsed.dropped,
        )
        return parsed

    @staticmethod
    def _flatten(tables: Iterable[FluxTable]) -> List[Dict[str, Any]]:
        # pivot already yields one record per timestamp; _time is a datetime
        return [dict(record.values) for table in tables for record in table.records]
