"""
Health domain entities.

A health report is a tree: every node carries its own name and status plus
the reports of everything it depends on.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Iterator, List, Optional


class ServiceStatus(str, Enum):
    """Availability of a node or of one of its dependencies."""

    UP = "up"
    DEGRADED = "degraded"
    DOWN = "down"
    UNKNOWN = "unknown"


@dataclass(slots=True)
class HealthState:
    """Nested health report produced by a single probe.

    ``dependencies`` holds exactly one state per probed dependency; an empty
    list on an ``UP`` state is a healthy leaf.
    """

    name: str
    status: ServiceStatus = ServiceStatus.UP
    dependencies: List[HealthState] = field(default_factory=list)
    message: Optional[str] = None
    latency_ms: Optional[float] = None
    checked_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_healthy(self) -> bool:
        return self.status is ServiceStatus.UP

    def walk(self) -> Iterator[HealthState]:
        """Yield this state and every descendant, depth first."""
        yield self
        for dependency in self.dependencies:
            yield from dependency.walk()

    def find(self, name: str) -> Optional[HealthState]:
        """Return the first state in the tree named ``name``, if any."""
        return next((state for state in self.walk() if state.name == name), None)
