from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

import pytest

from healthmesh.application.dtos.health_dto import HealthStateDTO
from healthmesh.application.use_cases.health_use_cases import GetHealthStateUseCase
from healthmesh.domain.entities.health import HealthState, ServiceStatus


@dataclass
class _StubHealthNode:
    state: HealthState
    name: str = "A"
    depths: List[int] = field(default_factory=list)

    async def query_state(self, depth: int = 0) -> HealthState:
        self.depths.append(depth)
        return self.state


@pytest.mark.asyncio
async def test_get_health_state_use_case_returns_dto() -> None:
    state = HealthState(
        name="A",
        status=ServiceStatus.DEGRADED,
        dependencies=[
            HealthState(name="db"),
            HealthState(name="http://b/health", status=ServiceStatus.DOWN),
        ],
    )
    node = _StubHealthNode(state)

    dto = await GetHealthStateUseCase(health_node=node).execute()

    assert isinstance(dto, HealthStateDTO)
    assert dto.name == "A"
    assert dto.status is ServiceStatus.DEGRADED
    assert dto.dependencies[1].status is ServiceStatus.DOWN
    assert node.depths == [0]


@pytest.mark.asyncio
async def test_get_health_state_use_case_forwards_depth() -> None:
    node = _StubHealthNode(HealthState(name="A"))

    await GetHealthStateUseCase(health_node=node).execute(depth=3)

    assert node.depths == [3]
