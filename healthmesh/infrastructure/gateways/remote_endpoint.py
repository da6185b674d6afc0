"""Remote endpoint gateway - probes a peer node's health query surface."""

from __future__ import annotations

from time import perf_counter

import httpx
from pydantic import ValidationError

from healthmesh.application.dtos.health_dto import HealthStateDTO
from healthmesh.domain.entities.health import HealthState, ServiceStatus
from healthmesh.domain.ports.health_probe import IHttpDoer
from healthmesh.shared import HEALTH_DEPTH_HEADER, get_logger

logger = get_logger(__name__)


class RemoteEndpoint:
    """Prepared request to a peer node plus the transport used to send it.

    Every failure mode (transport error, bad status code, unparseable
    body) becomes a state named after the endpoint URL, so the endpoint is
    always represented in the parent's report.
    """

    def __init__(self, request: httpx.Request, transport: IHttpDoer) -> None:
        """
        Initialize the endpoint.

        Args:
            request: Fully prepared request; its body must already be read
                (built from bytes, text or JSON, not a stream).
            transport: Shared transport capability, typically an
                ``httpx.AsyncClient``.
        """
        self._request = request
        self._transport = transport
        self.name = str(request.url)

    @property
    def request(self) -> httpx.Request:
        return self._request

    async def probe(self, depth: int = 0) -> HealthState:
        """
        Query the peer and return its report.

        Args:
            depth: Remote hops already travelled; the peer receives
                ``depth + 1`` in the depth header.

        Returns:
            HealthState: The peer's own nested report on success, otherwise a
            ``DOWN``/``DEGRADED`` state describing the failure.
        """
        request = self._prepare(depth)
        logger.debug(
            "remote_endpoint.request",
            method=request.method,
            url=self.name,
            depth=depth + 1,
        )

        start = perf_counter()
        try:
            response = await self._transport.send(request)
        except httpx.RequestError as exc:
            latency_ms = (perf_counter() - start) * 1000
            logger.warning(
                "remote_endpoint.request_error",
                url=self.name,
                error=str(exc),
            )
            return HealthState(
                name=self.name,
                status=ServiceStatus.DOWN,
                message=f"HTTP request failed: {exc}",
                latency_ms=latency_ms,
            )

        latency_ms = (perf_counter() - start) * 1000
        status_code = response.status_code

        if not response.is_success:
            logger.warning(
                "remote_endpoint.http_error",
                url=self.name,
                status_code=status_code,
            )
            return HealthState(
                name=self.name,
                status=(
                    ServiceStatus.DOWN if status_code >= 500 else ServiceStatus.DEGRADED
                ),
                message=f"HTTP {status_code}",
                latency_ms=latency_ms,
            )

        try:
            payload = HealthStateDTO.model_validate_json(response.content)
        except ValidationError as exc:
            logger.warning(
                "remote_endpoint.decode_error",
                url=self.name,
                error=str(exc),
            )
            return HealthState(
                name=self.name,
                status=ServiceStatus.DOWN,
                message=f"Unparseable health payload: {exc.error_count()} error(s)",
                latency_ms=latency_ms,
            )

        state = payload.to_domain()
        state.latency_ms = latency_ms
        return state

    def _prepare(self, depth: int) -> httpx.Request:
        headers = httpx.Headers(self._request.headers)
        headers[HEALTH_DEPTH_HEADER] = str(depth + 1)
        return httpx.Request(
            self._request.method,
            self._request.url,
            headers=headers,
            content=self._request.content,
            extensions=self._request.extensions,
        )

    def __repr__(self) -> str:
        return f"<RemoteEndpoint {self._request.method} {self.name}>"
