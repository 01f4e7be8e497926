"""Tests for the command line interface."""

import pytest

from town_graph.cli import build_parser, configure_logging, main
from town_graph.config import ObservabilityConfig, reset_config
from town_graph.domain.errors import ConfigurationError


@pytest.fixture
def roads_file(tmp_path):
    path = tmp_path / "towns.txt"
    path.write_text(
        "I-95,12;Baltimore;Towson\n"
        "Route 1,20;Towson;Bel Air\n"
        "Coastal,30;Ocean City;Berlin\n",
        encoding="utf-8",
    )
    return path


def test_towns_command(roads_file, capsys):
    assert main(["--file", str(roads_file), "towns"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["Baltimore", "Bel Air", "Berlin", "Ocean City", "Towson"]


def test_roads_command(roads_file, capsys):
    assert main(["--file", str(roads_file), "roads"]) == 0
    assert capsys.readouterr().out.splitlines() == ["Coastal", "I-95", "Route 1"]


def test_path_command(roads_file, capsys):
    assert main(["--file", str(roads_file), "path", "Baltimore", "Bel Air"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Baltimore via I-95 to Towson 12 mi",
        "Towson via Route 1 to Bel Air 20 mi",
        "Total distance: 32 mi",
    ]


def test_path_command_without_route(roads_file, capsys):
    assert main(["--file", str(roads_file), "path", "Baltimore", "Berlin"]) == 1
    assert "No path" in capsys.readouterr().out


def test_bad_file_reports_error(tmp_path, capsys):
    assert main(["--file", str(tmp_path / "missing.txt"), "towns"]) == 2
    assert "Error" in capsys.readouterr().err


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ConfigurationError):
        configure_logging(ObservabilityConfig(level="chatty"))


def test_configure_logging_accepts_lowercase_level():
    configure_logging(ObservabilityConfig(level="warning"))


def test_undecodable_file_reports_error(tmp_path, capsys):
    path = tmp_path / "towns.txt"
    path.write_bytes(b"I-95,12;Balt\xffimore;Towson\n")

    assert main(["--file", str(path), "towns"]) == 2
    assert "Error" in capsys.readouterr().err


def test_bad_log_level_reports_error(roads_file, monkeypatch, capsys):
    monkeypatch.setenv("TOWN_LOG_LEVEL", "chatty")
    reset_config()
    try:
        assert main(["--file", str(roads_file), "towns"]) == 2
    finally:
        reset_config()
    assert "Unknown log level" in capsys.readouterr().err
