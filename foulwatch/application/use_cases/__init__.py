"""
Use Cases Package - Application Layer

Use cases orchestrate the reading source, the forecast pipeline and the
health checks on behalf of the presentation layer.
"""

from .dashboard_use_cases import GetDashboardUseCase, GetReadingsUseCase
from .health_use_cases import GetApplicationInfoUseCase, GetHealthStatusUseCase

__all__ = [
    "GetDashboardUseCase",
    "GetReadingsUseCase",
    "GetHealthStatusUseCase",
    "GetApplicationInfoUseCase",
]
