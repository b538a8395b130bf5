"""
Infrastructure Layer Package

Implementations of the domain interfaces that talk to external systems:
the InfluxDB historian and dependency health checks.
"""

from foulwatch.infrastructure import gateways, services

__all__ = ["gateways", "services"]
