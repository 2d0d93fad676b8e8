"""Configuration management using Pydantic Settings."""

import logging
from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Deployment environment presets."""

    DEV = "dev"
    PROD = "prod"
    TEST = "test"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="KGRAPH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Depth repair
    max_supported_depth: int = Field(
        default=10,
        ge=0,
        description="Highest level visited by the level-by-level repair"
    )

    # Electron shell rings (presentation only)
    shell_base_radius: float = 80.0
    shell_depth_spacing: float = 120.0

    # Knowledge map
    default_knowledge_map_id: str = "demo-map"

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Root log level used by configure_logging()"
    )


def get_dev_settings() -> Settings:
    """Get development environment settings."""
    return Settings(log_level="DEBUG")


def get_test_settings() -> Settings:
    """Get test environment settings."""
    return Settings(
        log_level="WARNING",
        default_knowledge_map_id="test-map",
    )


def get_settings(env: Environment | str = Environment.DEV) -> Settings:
    """Get settings for an environment preset."""
    env = Environment(env)
    if env == Environment.TEST:
        return get_test_settings()
    if env == Environment.DEV:
        return get_dev_settings()
    return Settings()


def configure_logging(config: Settings | None = None) -> None:
    """Set up root logging for applications embedding kgraph."""
    config = config or settings
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


# Global settings instance
settings = Settings()
