"""
Gateways Package - Infrastructure Layer

Concrete implementations of the domain gateway interfaces.
"""

from .influxdb_gateway import InfluxDBReadingGateway, ReadingSourceError

__all__ = ["InfluxDBReadingGateway", "ReadingSourceError"]
