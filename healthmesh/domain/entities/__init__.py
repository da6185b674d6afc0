"""
Domain Entities Package

This package contains the health report value objects and domain errors.
"""

from .errors import DomainError, RequestConstructionError
from .health import HealthState, ServiceStatus

__all__ = [
    "HealthState",
    "ServiceStatus",
    "DomainError",
    "RequestConstructionError",
]
