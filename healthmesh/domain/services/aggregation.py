"""Concurrent fan-out over probe targets and status roll-up."""

from __future__ import annotations

import asyncio
from time import perf_counter
from typing import Iterable, List, Sequence

from healthmesh.domain.entities.health import HealthState, ServiceStatus
from healthmesh.domain.ports.health_probe import IProbeTarget
from healthmesh.shared import get_logger

logger = get_logger(__name__)


async def gather_states(
    targets: Sequence[IProbeTarget], depth: int = 0
) -> List[HealthState]:
    """Probe every target concurrently and return one state per target.

    Each task writes only to its own result slot; ``asyncio.gather`` joins
    them once all have finished, so no entry can be lost or duplicated.
    Results keep the order of ``targets``.
    """
    if not targets:
        return []

    tasks = [
        asyncio.create_task(_probe_contained(target, depth)) for target in targets
    ]
    return list(await asyncio.gather(*tasks))


async def _probe_contained(target: IProbeTarget, depth: int) -> HealthState:
    start = perf_counter()
    try:
        return await target.probe(depth)
    except Exception as exc:
        latency_ms = (perf_counter() - start) * 1000
        logger.warning(
            "aggregation.probe.failed",
            target=target.name,
            error=str(exc),
            exc_info=exc,
        )
        return HealthState(
            name=target.name,
            status=ServiceStatus.DOWN,
            message=f"Probe raised: {exc}",
            latency_ms=latency_ms,
        )


def aggregate_status(
    states: Iterable[HealthState], own_status: ServiceStatus = ServiceStatus.UP
) -> ServiceStatus:
    """Roll child states up into the status of their parent.

    A parent that answered is never ``DOWN`` because of a child; a child that
    is not ``UP`` only degrades it.
    """
    if own_status is ServiceStatus.DOWN:
        return ServiceStatus.DOWN

    for state in states:
        if state.status is not ServiceStatus.UP:
            return ServiceStatus.DEGRADED

    return own_status
