"""
Main module - Main/Composition Root Layer

Loads settings, configures logging, builds the dependency container and
initializes FastAPI.
"""

from .config import AppSettings, get_settings
from .container import AppContainer, get_container, init_container

__all__ = [
    "AppSettings",
    "get_settings",
    "AppContainer",
    "init_container",
    "get_container",
]
