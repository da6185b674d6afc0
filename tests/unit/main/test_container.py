from __future__ import annotations

import httpx
import pytest

from healthmesh.application.use_cases.health_use_cases import GetHealthStateUseCase
from healthmesh.domain.entities.errors import RequestConstructionError
from healthmesh.infrastructure.services.health_node import HealthNode
from healthmesh.main.config import AppSettings, NodeSettings
from healthmesh.main.container import (
    app_lifespan,
    build_health_node,
    get_container,
    init_container,
)


def test_build_health_node_registers_configuration() -> None:
    node = build_health_node(
        name="A",
        transport=httpx.AsyncClient(),
        dependencies=["db", "cache"],
        endpoints=["http://node-b/health"],
        max_depth=4,
    )

    assert node.name == "A"
    assert node.max_depth == 4
    assert [dep.name for dep in node.dependencies] == ["db", "cache"]
    assert [endpoint.name for endpoint in node.endpoints] == ["http://node-b/health"]


def test_build_health_node_rejects_malformed_endpoint() -> None:
    with pytest.raises(RequestConstructionError):
        build_health_node(
            name="A",
            transport=httpx.AsyncClient(),
            dependencies=[],
            endpoints=["node-b/health"],
            max_depth=4,
        )


def test_init_and_get_container() -> None:
    settings = AppSettings(node=NodeSettings(name="A", dependencies=["db"]))
    container = init_container(settings)

    assert get_container() is container

    node = container.health_node()
    assert isinstance(node, HealthNode)
    assert node.name == "A"
    assert node.transport is container.http_client()
    assert container.health_node() is node
    assert isinstance(container.get_health_state_use_case(), GetHealthStateUseCase)


@pytest.mark.asyncio
async def test_app_lifespan_closes_transport() -> None:
    container = init_container(AppSettings())
    client = container.http_client()

    async with app_lifespan() as lifespan_container:
        assert lifespan_container is container
        assert not client.is_closed

    assert client.is_closed


def test_get_container_without_init_raises(monkeypatch) -> None:
    monkeypatch.setattr("healthmesh.main.container._app_container", None)
    with pytest.raises(RuntimeError):
        get_container()
