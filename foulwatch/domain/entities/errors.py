"""
Domain Errors

Error taxonomy of the fouling analytics core. Data unavailability and
numeric degeneracy are resolved locally and never escape the pipeline;
configuration errors are fatal and must abort pipeline construction.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ConfigurationError(DomainError):
    """Raised when plant parameters or thresholds make a metric ill-defined."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class MalformedReadingError(DomainError):
    """Raised for a single source record missing a required numeric field."""

    def __init__(
        self, field_name: str, value: Any, details: Optional[Dict[str, Any]] = None
    ):
        self.field_name = field_name
        self.value = value
        message = f"Invalid value for '{field_name}': {value!r}"
        super().__init__(message, details)


class DataUnavailableError(DomainError):
    """Raised by a reading source that cannot deliver any data."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
