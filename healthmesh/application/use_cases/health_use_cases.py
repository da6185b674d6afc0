"""Use case behind the health query surface."""

from healthmesh.application.dtos.health_dto import HealthStateDTO
from healthmesh.domain.ports.health_probe import IHealthNode


class GetHealthStateUseCase:
    """Query the bound node and return its report as a DTO."""

    def __init__(self, health_node: IHealthNode) -> None:
        self._health_node = health_node

    async def execute(self, depth: int = 0) -> HealthStateDTO:
        state = await self._health_node.query_state(depth)
        return HealthStateDTO.from_domain(state)
