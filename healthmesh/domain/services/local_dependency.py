"""In-process dependency registered directly on a health node."""

from __future__ import annotations

import asyncio
import inspect
from time import perf_counter
from typing import Any, Awaitable, Callable, List, Optional, Tuple, Union

from healthmesh.domain.entities.health import HealthState, ServiceStatus
from healthmesh.domain.services.aggregation import aggregate_status, gather_states
from healthmesh.shared import get_logger

logger = get_logger(__name__)

DetectorFn = Callable[[], Union[Any, Awaitable[Any]]]


class LocalDependency:
    """Named sub-component probed without any network transport.

    A dependency may carry a detector and nested dependencies of its own.
    Without either it reports a healthy leaf.

    Examples
    --------
    >>> db = LocalDependency("db")
    >>> db.register("replica").detect(lambda: True)  # doctest: +ELLIPSIS
    <LocalDependency name='replica' ...>
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._dependencies: List[LocalDependency] = []
        self._detector: Optional[DetectorFn] = None

    @property
    def dependencies(self) -> Tuple[LocalDependency, ...]:
        return tuple(self._dependencies)

    def register(self, name: str) -> LocalDependency:
        """Attach and return a nested dependency. Duplicate names are kept."""
        dependency = LocalDependency(name)
        self._dependencies.append(dependency)
        logger.debug("local_dependency.registered", parent=self.name, name=name)
        return dependency

    def detect(self, detector: DetectorFn) -> LocalDependency:
        """Set the zero-argument check run on every probe.

        The detector may be sync or async. Raising, or returning ``False``,
        marks the dependency down; any other outcome means it is up. Sync
        detectors run in a worker thread so they never block the event loop.
        """
        self._detector = detector
        return self

    async def probe(self, depth: int = 0) -> HealthState:
        start = perf_counter()
        detection = asyncio.create_task(self._run_detector())
        children = await gather_states(self._dependencies, depth)
        own_status, message = await detection
        latency_ms = (perf_counter() - start) * 1000

        return HealthState(
            name=self.name,
            status=aggregate_status(children, own_status),
            dependencies=children,
            message=message,
            latency_ms=latency_ms,
        )

    async def _run_detector(self) -> Tuple[ServiceStatus, Optional[str]]:
        if self._detector is None:
            return ServiceStatus.UP, None

        try:
            if inspect.iscoroutinefunction(self._detector):
                result = await self._detector()
            else:
                result = await asyncio.to_thread(self._detector)
                if inspect.isawaitable(result):
                    result = await result
        except Exception as exc:
            logger.warning(
                "local_dependency.detector.failed",
                name=self.name,
                error=str(exc),
            )
            return ServiceStatus.DOWN, f"Detector failed: {exc}"

        if result is False:
            return ServiceStatus.DOWN, "Detector reported failure"
        return ServiceStatus.UP, None

    def __repr__(self) -> str:
        return (
            f"<LocalDependency name={self.name!r} "
            f"dependencies={len(self._dependencies)}>"
        )
