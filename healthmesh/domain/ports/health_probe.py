"""Domain abstractions for anything that can be asked for its health."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from healthmesh.domain.entities.health import HealthState

if TYPE_CHECKING:
    import httpx


class IProbeTarget(Protocol):
    """A local dependency or remote endpoint that yields a health report."""

    name: str

    async def probe(self, depth: int = 0) -> HealthState:
        """Produce the target's health state.

        ``depth`` counts the remote hops already travelled by the query.
        """
        ...


class IHttpDoer(Protocol):
    """Transport capability: send a prepared request, return its response.

    ``httpx.AsyncClient`` satisfies this contract and is safe to share
    across concurrent probes.
    """

    async def send(self, request: httpx.Request) -> httpx.Response:
        ...


class IHealthNode(Protocol):
    """Aggregation node answering health queries for itself and its dependencies."""

    name: str

    async def query_state(self, depth: int = 0) -> HealthState:
        """Probe every registered dependency and merge the results."""
        ...
