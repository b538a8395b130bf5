"""
Domain Layer Package

Readings, plant configuration and the fouling analytics pipeline. No
dependency on frameworks or infrastructure concerns.
"""

# Re-export submodules
from foulwatch.domain import entities, gateways, ports, services

__all__ = ["entities", "gateways", "ports", "services"]
