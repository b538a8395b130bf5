"""
Gateways Package - Domain Layer

Interfaces for the external reading source. Implementations are
provided by the infrastructure layer.
"""

from .reading_source import IReadingSource

__all__ = ["IReadingSource"]
