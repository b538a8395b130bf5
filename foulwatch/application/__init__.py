"""
Application Layer Package

Use cases and DTOs that connect the reading source, the forecast pipeline
and the presentation layer.
"""

# Re-export submodules
from foulwatch.application import dtos, models, use_cases

__all__ = ["dtos", "use_cases", "models"]
