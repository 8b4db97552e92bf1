# tests/test_config.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from wkt_parser.config import CONFIG_PATH, WKTConfig, get_config, load_config
from wkt_parser.core.context import Dimension
from wkt_parser.core.exceptions import ConfigError
from wkt_parser.logging import get_logger, list_active_loggers, log_debug, log_warning


def test_project_config_file_exists() -> None:
    assert CONFIG_PATH.is_file(), f"Expected config at: {CONFIG_PATH}"


def test_project_config_defaults() -> None:
    cfg = get_config()
    assert cfg.dimension is Dimension.XY
    assert cfg.allow_trailing is True
    assert cfg.debug is False


def test_get_config_is_cached() -> None:
    assert get_config() is get_config()


def test_load_config_from_explicit_path(tmp_path: Path) -> None:
    path = tmp_path / "custom.yml"
    path.write_text(
        "debug: true\nparser:\n  dimension: XYZM\n  allow_trailing: false\n",
        encoding="utf-8",
    )
    cfg = load_config(path)
    assert cfg.debug is True
    assert cfg.dimension is Dimension.XYZM
    assert cfg.allow_trailing is False


def test_load_config_missing_explicit_path(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yml")


def test_empty_config_uses_defaults(tmp_path: Path) -> None:
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")
    cfg = load_config(path)
    assert cfg.dimension is Dimension.XY
    assert cfg.allow_trailing is True
    assert cfg.logging == {}


def test_unknown_dimension_is_rejected() -> None:
    cfg = WKTConfig({"parser": {"dimension": "xyzw"}})
    with pytest.raises(ConfigError):
        cfg.dimension


def test_get_logger_names_live_under_package() -> None:
    log = get_logger("parser_core")
    assert log.name == "wkt_parser.parser_core"
    assert "wkt_parser.parser_core" in list_active_loggers()
    assert get_logger("wkt_parser.cli").name == "wkt_parser.cli"


def test_log_helpers_write_to_package_logger(caplog, monkeypatch) -> None:
    get_logger()
    monkeypatch.setattr(logging.getLogger("wkt_parser"), "propagate", True)
    with caplog.at_level("DEBUG", logger="wkt_parser"):
        log_debug("debug message")
        log_warning("warning message")
    records = [(r.name, r.levelname, r.getMessage()) for r in caplog.records]
    assert ("wkt_parser", "DEBUG", "debug message") in records
    assert ("wkt_parser", "WARNING", "warning message") in records


def test_max_depth_configuration(tmp_path: Path) -> None:
    assert get_config().max_depth == 100
    assert WKTConfig({"parser": {"max_depth": 7}}).max_depth == 7
    for bad in (0, -3, "deep", True):
        with pytest.raises(ConfigError):
            WKTConfig({"parser": {"max_depth": bad}}).max_depth
