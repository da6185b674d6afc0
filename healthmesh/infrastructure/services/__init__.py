"""Infrastructure services package."""

from .health_node import HealthNode

__all__ = ["HealthNode"]
