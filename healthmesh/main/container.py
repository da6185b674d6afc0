"""
Dependency container injection module - Main Layer

Builds the shared transport, the health node and the use case consumed by
the presentation layer.
"""

from contextlib import asynccontextmanager
from typing import Iterable

import httpx
from dependency_injector import containers, providers

from healthmesh.application.use_cases.health_use_cases import GetHealthStateUseCase
from healthmesh.domain.ports.health_probe import IHttpDoer
from healthmesh.infrastructure.services.health_node import HealthNode
from healthmesh.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


def build_health_node(
    name: str,
    transport: IHttpDoer,
    dependencies: Iterable[str],
    endpoints: Iterable[str],
    max_depth: int,
) -> HealthNode:
    """Create the node and register the configured dependencies and peers."""
    node = HealthNode(name, transport, max_depth=max_depth)
    for dependency in dependencies or ():
        node.register(dependency)
    for url in endpoints or ():
        node.register_endpoint(url)
    return node


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(packages=["..presentation"])

    # Settings
    config = providers.Configuration()

    # Infrastructure
    http_client = providers.Singleton(httpx.AsyncClient, timeout=None)

    health_node = providers.Singleton(
        build_health_node,
        name=config.node.name,
        transport=http_client,
        dependencies=config.node.dependencies,
        endpoints=config.node.endpoints,
        max_depth=config.node.max_depth,
    )

    # Application (use cases)
    get_health_state_use_case = providers.Factory(
        GetHealthStateUseCase,
        health_node=health_node,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Build the health node at startup and release the transport on shutdown.

    Building the node eagerly makes a misconfigured endpoint URL fail the
    startup instead of the first health query.
    """
    container = get_container()
    http_client = container.http_client()

    try:
        node = container.health_node()
        logger.info(
            "container.health_node.ready",
            node=node.name,
            dependencies=len(node.dependencies),
            endpoints=len(node.endpoints),
        )
        yield container

    finally:
        logger.info("container.http_client.close")
        await http_client.aclose()
        logger.info("container.resources.shutdown")
