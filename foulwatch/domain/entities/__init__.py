"""
Domain Entities Package

This package contains the core domain entities and value objects.
"""

from .errors import (
    ConfigurationError,
    DataUnavailableError,
    DomainError,
    MalformedReadingError,
)
from .health import ApplicationInfo, DependencyStatus, ServiceStatus, SystemHealth
from .plant import AlertThresholds, GaugeLimits, PlantConfiguration
from .reading import (
    Alert,
    AlertSeverity,
    AnnotatedPoint,
    CostBreakdown,
    ForecastResult,
    GaugeState,
    LatestSummary,
    ParsedReadings,
    ProcessStatus,
    Reading,
    Timeframe,
)

__all__ = [
    "Reading",
    "AnnotatedPoint",
    "CostBreakdown",
    "LatestSummary",
    "ForecastResult",
    "ParsedReadings",
    "ProcessStatus",
    "GaugeState",
    "Alert",
    "AlertSeverity",
    "Timeframe",
    "PlantConfiguration",
    "AlertThresholds",
    "GaugeLimits",
    "SystemHealth",
    "DependencyStatus",
    "ServiceStatus",
    "ApplicationInfo",
    "DomainError",
    "ConfigurationError",
    "MalformedReadingError",
    "DataUnavailableError",
]
