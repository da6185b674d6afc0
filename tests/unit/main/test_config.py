from __future__ import annotations

import pytest
from pydantic import ValidationError

from healthmesh.main.config import AppSettings, get_settings
from healthmesh.shared.consts import DEFAULT_MAX_DEPTH, EnumEnvironment, EnumLogFormat


def test_get_settings_loads_defaults(monkeypatch) -> None:
    monkeypatch.delenv("NODE_NAME", raising=False)
    settings = get_settings()
    assert settings.node.name == "healthmesh"
    assert settings.node.dependencies == []
    assert settings.node.endpoints == []
    assert settings.node.max_depth == DEFAULT_MAX_DEPTH
    assert settings.environment == EnumEnvironment.DEVELOPMENT


def test_settings_respect_environment_variables(monkeypatch) -> None:
    monkeypatch.setenv("NODE_NAME", "orders-api")
    monkeypatch.setenv("NODE_DEPENDENCIES", '["db", "cache"]')
    monkeypatch.setenv("NODE_ENDPOINTS", '["http://billing:8000/health"]')
    monkeypatch.setenv("NODE_MAX_DEPTH", "3")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = AppSettings()

    assert settings.node.name == "orders-api"
    assert settings.node.dependencies == ["db", "cache"]
    assert settings.node.endpoints == ["http://billing:8000/health"]
    assert settings.node.max_depth == 3
    assert settings.logging.level.value == "DEBUG"


def test_max_depth_must_be_positive(monkeypatch) -> None:
    monkeypatch.setenv("NODE_MAX_DEPTH", "0")

    with pytest.raises(ValidationError):
        AppSettings()


def test_log_format_is_read_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("LOG_FORMAT", "json")

    settings = AppSettings()

    assert settings.logging.format is EnumLogFormat.JSON
