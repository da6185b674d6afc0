"""Domain services: fan-out/merge rules and in-process dependencies."""

from .aggregation import aggregate_status, gather_states
from .local_dependency import DetectorFn, LocalDependency

__all__ = ["aggregate_status", "gather_states", "DetectorFn", "LocalDependency"]
