"""
DTOs Package - Application Layer

Serializable shapes exchanged over the health query protocol.
"""

from .health_dto import HealthStateDTO

__all__ = ["HealthStateDTO"]
