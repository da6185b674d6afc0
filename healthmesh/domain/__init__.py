"""
Domain Layer Package

Health entities, probe contracts and the aggregation rules, free of
transport or framework concerns.
"""

# Re-export submodules
from healthmesh.domain import entities, ports, services

__all__ = ["entities", "ports", "services"]
