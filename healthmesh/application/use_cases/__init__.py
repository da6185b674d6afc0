"""
Use Cases Package - Application Layer
"""

from .health_use_cases import GetHealthStateUseCase

__all__ = ["GetHealthStateUseCase"]
