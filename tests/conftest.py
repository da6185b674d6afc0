from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Callable, Dict, List

import httpx
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingHandler:
    """MockTransport handler returning a fixed outcome and keeping requests."""

    def __init__(self, outcome: httpx.Response | Exception) -> None:
        self._outcome = outcome
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self._outcome, Exception):
            raise self._outcome
        return self._outcome


@pytest.fixture()
def mock_client_factory() -> Callable[[Handler], httpx.AsyncClient]:
    def _factory(handler: Handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _factory


@pytest.fixture()
def peer_payload() -> Dict[str, Any]:
    return {
        "name": "B",
        "status": "up",
        "message": None,
        "latency_ms": 1.5,
        "checked_at": "2024-09-09T12:00:00Z",
        "dependencies": [
            {
                "name": "cache",
                "status": "up",
                "message": None,
                "latency_ms": 0.2,
                "checked_at": "2024-09-09T12:00:00Z",
                "dependencies": [],
            }
        ],
    }
