from pathlib import Path

import pytest

from displaymd.cli import build_parser, main
from displaymd.config import ConfigurationError, Settings, load_settings


def test_load_settings_canonicalizes_root(tmp_path: Path):
    (tmp_path / "docs").mkdir()
    settings = load_settings(tmp_path / "docs" / ".." / "docs")
    assert settings.root == (tmp_path / "docs").resolve()
    assert settings.root.is_absolute()
    assert settings.home == "README.md"
    assert settings.port == 3000


def test_settings_are_immutable(tmp_path: Path):
    settings = load_settings(tmp_path)
    with pytest.raises(AttributeError):
        settings.root = Path("/")


def test_missing_root_is_a_configuration_error(tmp_path: Path):
    with pytest.raises(ConfigurationError):
        load_settings(tmp_path / "nope")


def test_file_root_is_a_configuration_error(tmp_path: Path):
    (tmp_path / "a.md").write_text("", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_settings(tmp_path / "a.md")


def test_bad_port_is_a_configuration_error(tmp_path: Path):
    with pytest.raises(ConfigurationError):
        load_settings(tmp_path, port=70000)


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.dir == "."
    assert args.port == 3000
    assert args.home == "README.md"
    assert args.host == "127.0.0.1"


def test_parser_short_options():
    args = build_parser().parse_args(["docs", "-p", "8080", "-H", "index.md"])
    assert (args.dir, args.port, args.home) == ("docs", 8080, "index.md")


def test_main_refuses_to_start_on_missing_root(tmp_path: Path, monkeypatch):
    started = []
    monkeypatch.setattr("flask.Flask.run", lambda self, **kwargs: started.append(kwargs))
    assert main([str(tmp_path / "nope")]) == 2
    assert started == []


def test_main_runs_app_with_settings(tmp_path: Path, monkeypatch):
    started = []
    monkeypatch.setattr("flask.Flask.run", lambda self, **kwargs: started.append(kwargs))
    assert main([str(tmp_path), "--port", "4000"]) == 0
    assert started == [{"host": "127.0.0.1", "port": 4000}]
