"""Aggregation node: reports its own health and that of its dependencies."""

from __future__ import annotations

from time import perf_counter
from typing import List, Optional, Tuple

import httpx

from healthmesh.domain.entities.errors import RequestConstructionError
from healthmesh.domain.entities.health import HealthState, ServiceStatus
from healthmesh.domain.ports.health_probe import IHttpDoer, IProbeTarget
from healthmesh.domain.services.aggregation import aggregate_status, gather_states
from healthmesh.domain.services.local_dependency import LocalDependency
from healthmesh.infrastructure.gateways.remote_endpoint import RemoteEndpoint
from healthmesh.shared import DEFAULT_MAX_DEPTH, get_logger

logger = get_logger(__name__)


class HealthNode:
    """Named node that probes local dependencies and remote peers concurrently.

    Dependencies and endpoints are registered during setup; registration is
    not synchronized against in-flight queries. Each call to
    :meth:`query_state` is independent of the previous ones.

    The default transport is an ``httpx.AsyncClient`` without timeouts,
    owned by the node and released by :meth:`aclose`.
    """

    def __init__(
        self,
        name: str,
        transport: Optional[IHttpDoer] = None,
        *,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        self.name = name
        self.max_depth = max_depth
        self._owned_transport: Optional[httpx.AsyncClient] = None
        self._transport = transport
        self._dependencies: List[LocalDependency] = []
        self._endpoints: List[RemoteEndpoint] = []

    @property
    def transport(self) -> IHttpDoer:
        if self._transport is None:
            self._owned_transport = httpx.AsyncClient(timeout=None)
            self._transport = self._owned_transport
        return self._transport

    @property
    def dependencies(self) -> Tuple[LocalDependency, ...]:
        return tuple(self._dependencies)

    @property
    def endpoints(self) -> Tuple[RemoteEndpoint, ...]:
        return tuple(self._endpoints)

    def with_transport(self, transport: IHttpDoer) -> HealthNode:
        """Use ``transport`` for endpoints registered from now on."""
        self._transport = transport
        return self

    def register(self, name: str) -> LocalDependency:
        """Attach a named local dependency and return it for configuration."""
        dependency = LocalDependency(name)
        self._dependencies.append(dependency)
        logger.debug("health_node.dependency.registered", node=self.name, name=name)
        return dependency

    def register_endpoint(self, url: str) -> None:
        """
        Register a peer node reached with a plain ``GET`` on ``url``.

        Raises:
            RequestConstructionError: If ``url`` is not an absolute
                http(s) URL.
        """
        try:
            parsed = httpx.URL(url)
        except (httpx.InvalidURL, TypeError) as exc:
            raise RequestConstructionError(str(url), str(exc)) from exc

        if parsed.scheme not in ("http", "https") or not parsed.host:
            raise RequestConstructionError(url, "an absolute http(s) URL is required")

        self.register_endpoint_from_request(httpx.Request("GET", parsed))

    def register_endpoint_from_request(self, request: httpx.Request) -> None:
        """Register a peer node reached with a caller-prepared request."""
        self._endpoints.append(RemoteEndpoint(request, self.transport))
        logger.debug(
            "health_node.endpoint.registered",
            node=self.name,
            method=request.method,
            url=str(request.url),
        )

    async def query_state(self, depth: int = 0) -> HealthState:
        """Probe every dependency and endpoint concurrently and merge the results.

        The returned state has exactly one child per registered dependency
        and endpoint, in no guaranteed order. Sub-probe failures are folded
        into the children; this method does not raise because of them.

        Args:
            depth: Remote hops already travelled by this query. At
                ``max_depth`` the node answers ``UNKNOWN`` without fanning
                out, which bounds cycles between peers.
        """
        if depth >= self.max_depth:
            logger.warning(
                "health_node.query.depth_exceeded",
                node=self.name,
                depth=depth,
                max_depth=self.max_depth,
            )
            return HealthState(
                name=self.name,
                status=ServiceStatus.UNKNOWN,
                message="Maximum probe depth reached",
            )

        start = perf_counter()
        targets: List[IProbeTarget] = [*self._dependencies, *self._endpoints]
        children = await gather_states(targets, depth)
        latency_ms = (perf_counter() - start) * 1000

        state = HealthState(
            name=self.name,
            status=aggregate_status(children),
            dependencies=children,
            latency_ms=latency_ms,
        )
        logger.debug(
            "health_node.query.completed",
            node=self.name,
            status=state.status.value,
            dependencies=len(children),
            latency_ms=round(latency_ms, 3),
        )
        return state

    async def aclose(self) -> None:
        """Close the default transport if this node created one."""
        if self._owned_transport is not None:
            await self._owned_transport.aclose()
            if self._transport is self._owned_transport:
                self._transport = None
            self._owned_transport = None

    async def __aenter__(self) -> HealthNode:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return (
            f"<HealthNode name={self.name!r} dependencies={len(self._dependencies)} "
            f"endpoints={len(self._endpoints)}>"
        )
