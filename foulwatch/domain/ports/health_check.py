"""Port for probing the service's external dependencies."""

from __future__ import annotations

from typing import Protocol

from foulwatch.domain.entities.health import SystemHealth


class IHealthCheckService(Protocol):
    async def evaluate(self) -> SystemHealth:
        """Check every dependency and aggregate the result."""
        ...
