"""Health and application info value objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

from foulwatch.domain.entities.plant import PlantConfiguration


class ServiceStatus(str, Enum):
    UP = "up"
    DEGRADED = "degraded"
    DOWN = "down"
    UNKNOWN = "unknown"

    @classmethod
    def aggregate(cls, statuses: List["ServiceStatus"]) -> "ServiceStatus":
        """Worst status wins: down, then degraded, then unknown."""
        for candidate in (cls.DOWN, cls.DEGRADED, cls.UNKNOWN):
            if candidate in statuses:
                return candidate
        return cls.UP


@dataclass(slots=True)
class DependencyStatus:
    """Result of probing one external dependency (e.g. the InfluxDB historian)."""

    name: str
    status: ServiceStatus
    message: Optional[str] = None
    checked_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    latency_ms: Optional[float] = None
    details: Dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class SystemHealth:
    status: ServiceStatus
    dependencies: List[DependencyStatus] = field(default_factory=list)


@dataclass(slots=True)
class ApplicationInfo:
    """Operational metadata surfaced by the /info endpoint."""

    name: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    started_at: datetime
    uptime_seconds: float
    status: ServiceStatus
    dependencies: List[DependencyStatus] = field(default_factory=list)
    plant: Optional[PlantConfiguration] = None
    historian: Dict[str, str] = field(default_factory=dict)
