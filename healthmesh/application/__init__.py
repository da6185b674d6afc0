"""
Application Layer Package

Use cases and DTOs sitting between the health domain and the query surface.
"""

# Re-export submodules
from healthmesh.application import dtos, use_cases

__all__ = ["dtos", "use_cases"]
