"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- TOWN_GRAPH_DATA_DIR=/path/to/data
- TOWN_GRAPH_ROADS_FILE=towns.txt
- TOWN_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Road import configuration.

    Environment variables prefixed with TOWN_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="TOWN_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    roads_file: str = "towns.txt"
    encoding: str = "utf-8"

    @property
    def roads_path(self) -> Path:
        """Full path to the road import file."""
        return self.data_dir / self.roads_file


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with TOWN_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="TOWN_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.roads_path)

    Environment variables prefixed with TOWN_.
    """

    model_config = SettingsConfigDict(env_prefix="TOWN_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    @property
    def project_root(self) -> Path:
        """Return the project root directory."""
        return Path(__file__).resolve().parent.parent


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
