from __future__ import annotations

import pytest

from healthmesh.main import app as module_app
from healthmesh.main.app import create_app


@pytest.mark.asyncio
async def test_create_app_initializes_lifespan() -> None:
    app = create_app()
    assert app.title
    assert any(getattr(route, "path", None) == "/health" for route in app.routes)

    async with app.router.lifespan_context(app):
        assert app.state.container.health_node() is not None

    # Ensure module-level app is instantiated
    assert isinstance(module_app.app, type(app))
