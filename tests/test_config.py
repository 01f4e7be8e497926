"""Tests for environment-driven configuration."""

from pathlib import Path

import pytest

from town_graph.config import AppConfig, GraphConfig, get_config, reset_config


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


def test_defaults():
    config = AppConfig()
    assert config.graph.roads_file == "towns.txt"
    assert config.graph.roads_path == config.project_root / "data" / "towns.txt"
    assert config.observability.level == "INFO"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("TOWN_GRAPH_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TOWN_GRAPH_ROADS_FILE", "roads.txt")
    monkeypatch.setenv("TOWN_LOG_LEVEL", "DEBUG")

    config = get_config()

    assert config.graph.roads_path == Path(tmp_path) / "roads.txt"
    assert config.observability.level == "DEBUG"


def test_get_config_is_cached():
    assert get_config() is get_config()
    first = get_config()
    reset_config()
    assert get_config() is not first


def test_graph_config_explicit_values(tmp_path):
    config = GraphConfig(data_dir=tmp_path, roads_file="x.txt", encoding="latin-1")
    assert config.roads_path == tmp_path / "x.txt"
    assert config.encoding == "latin-1"
