"""
Presentation Layer Package

HTTP surface of the service: FastAPI routers and their error mapping.
"""

from foulwatch.presentation import controllers

__all__ = ["controllers"]
