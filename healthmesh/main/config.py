"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
Values come from environment variables, a .env file or the defaults below.
"""

from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from healthmesh.shared import (
    DEFAULT_MAX_DEPTH,
    EnumEnvironment,
    EnumLogFormat,
    EnumLogLevel,
)


class NodeSettings(BaseSettings):
    """Identity and dependencies of the health node served by this process."""

    name: str = Field(default="healthmesh", description="Name reported by this node")
    title: str = Field(default="healthmesh", description="API title")
    description: str = Field(
        default="Composable health-state aggregation node",
        description="API description",
    )
    version: str = Field(default="0.1.0", description="API version")
    dependencies: List[str] = Field(
        default_factory=list,
        description="Names of local dependencies registered at startup",
    )
    endpoints: List[str] = Field(
        default_factory=list,
        description="Health URLs of peer nodes registered at startup",
    )
    max_depth: int = Field(
        default=DEFAULT_MAX_DEPTH,
        ge=1,
        description="Remote hops a query may travel before fan-out stops",
    )

    model_config = SettingsConfigDict(
        env_prefix="NODE_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    format: Optional[EnumLogFormat] = Field(
        default=None,
        description="Renderer (json or console); chosen by environment if unset",
    )
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    node: NodeSettings = Field(default_factory=NodeSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Kept as a function so tests can swap the settings source.
    """
    return AppSettings()
