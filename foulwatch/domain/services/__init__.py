"""
Domain Services Package

Pure functions and the forecast pipeline composing them.
"""

from .forecast_pipeline import ForecastPipeline, PipelineStage

__all__ = ["ForecastPipeline", "PipelineStage"]
