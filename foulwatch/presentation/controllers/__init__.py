"""
Controllers Package - Presentation Layer

FastAPI routers mapping HTTP requests to application use cases.
"""

from .dashboard_controller import router as dashboard_router
from .system_controller import router as system_router

__all__ = ["dashboard_router", "system_router"]
