"""
Controllers Package - Presentation Layer

FastAPI routers mapping HTTP requests onto application use cases.
"""

from .health_controller import router as health_router

__all__ = ["health_router"]
