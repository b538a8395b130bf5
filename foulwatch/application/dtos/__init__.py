"""
DTOs Package - Application Layer

Data Transfer Objects exchanged between the application layer and the
presentation layer.
"""

from .dashboard_dto import (
    AlertDTO,
    AnnotatedPointDTO,
    CostBreakdownDTO,
    DashboardResponseDTO,
    LatestPointDTO,
    ProcessStatusDTO,
    ReadingDTO,
    ReadingsResponseDTO,
)
from .health_dto import (
    AlertThresholdsDTO,
    ApplicationInfoDTO,
    DependencyStatusDTO,
    PlantSummaryDTO,
    SystemHealthDTO,
)

__all__ = [
    "ReadingDTO",
    "AnnotatedPointDTO",
    "CostBreakdownDTO",
    "ProcessStatusDTO",
    "LatestPointDTO",
    "AlertDTO",
    "DashboardResponseDTO",
    "ReadingsResponseDTO",
    "SystemHealthDTO",
    "DependencyStatusDTO",
    "ApplicationInfoDTO",
    "PlantSummaryDTO",
    "AlertThresholdsDTO",
]
