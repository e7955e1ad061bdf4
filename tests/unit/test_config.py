"""Tests for loading and saving arglex configuration."""

from __future__ import annotations

import tomllib
from typing import TYPE_CHECKING

import pytest

from arglex.config import ArglexConfig
from arglex.conventions import Convention
from arglex.errors import ConfigError
from arglex.paths import get_config_path

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from pytest import MonkeyPatch

pytestmark = pytest.mark.unit


def _write(config_dir: Path, content: str) -> Path:
    config_dir.mkdir(parents=True, exist_ok=True)
    path = config_dir / "config.toml"
    path.write_text(content, encoding="utf-8")
    return path


def test_config_path_honours_env(config_dir: Path) -> None:
    assert get_config_path() == config_dir / "config.toml"


def test_missing_file_gives_defaults(config_dir: Path) -> None:
    cfg = ArglexConfig.load()
    assert cfg.convention == "native"
    assert cfg.output.format == "lines"
    assert not config_dir.exists()


def test_loads_values_from_toml(config_dir: Path) -> None:
    _write(config_dir, 'convention = "Windows"\n\n[output]\nformat = "json"\n')
    cfg = ArglexConfig.load()
    assert cfg.convention == "windows"
    assert cfg.default_convention() is Convention.WINDOWS
    assert cfg.output.format == "json"


def test_native_resolves_by_platform(
    config_dir: Path, mock_platform_system: Callable[[str], None]
) -> None:
    del config_dir
    mock_platform_system("Windows")
    assert ArglexConfig.load().default_convention() is Convention.WINDOWS
    mock_platform_system("Linux")
    assert ArglexConfig.load().default_convention() is Convention.POSIX


def test_env_overrides_file(config_dir: Path, monkeypatch: MonkeyPatch) -> None:
    _write(config_dir, 'convention = "windows"\n')
    monkeypatch.setenv("ARGLEX_CONVENTION", "posix")
    assert ArglexConfig.load().default_convention() is Convention.POSIX


def test_invalid_toml_raises_config_error(config_dir: Path) -> None:
    _write(config_dir, "convention = \n")
    with pytest.raises(ConfigError, match="Cannot read config file"):
        ArglexConfig.load()


def test_unknown_convention_raises_config_error(config_dir: Path) -> None:
    _write(config_dir, 'convention = "fish"\n')
    with pytest.raises(ConfigError, match="Invalid configuration"):
        ArglexConfig.load()


def test_unknown_output_format_raises_config_error(config_dir: Path) -> None:
    _write(config_dir, '[output]\nformat = "csv"\n')
    with pytest.raises(ConfigError):
        ArglexConfig.load()


def test_save_round_trips(config_dir: Path) -> None:
    cfg = ArglexConfig.model_validate({"convention": "posix", "output": {"format": "null"}})
    written = cfg.save()

    assert written == config_dir / "config.toml"
    with open(written, "rb") as f:
        data = tomllib.load(f)
    assert data == {"convention": "posix", "output": {"format": "null"}}
    assert ArglexConfig.load() == cfg
    assert not list(config_dir.glob(".tmp_*"))


def test_save_to_explicit_path(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "arglex.toml"
    ArglexConfig().save(target)
    assert ArglexConfig.load(target) == ArglexConfig()


def test_bad_env_convention_names_the_variable(config_dir: Path, monkeypatch: MonkeyPatch) -> None:
    _write(config_dir, 'convention = "windows"\n')
    monkeypatch.setenv("ARGLEX_CONVENTION", "fish")
    with pytest.raises(ConfigError) as exc_info:
        ArglexConfig.load()
    message = str(exc_info.value)
    assert message.startswith("Invalid configuration in environment variable ARGLEX_CONVENTION='fish'")
    assert "config.toml" not in message


def test_bad_file_value_names_the_file_even_with_env_set(
    config_dir: Path, monkeypatch: MonkeyPatch
) -> None:
    path = _write(config_dir, '[output]\nformat = "csv"\n')
    monkeypatch.setenv("ARGLEX_CONVENTION", "posix")
    with pytest.raises(ConfigError, match="Invalid configuration in") as exc_info:
        ArglexConfig.load()
    assert str(path) in str(exc_info.value)
    assert "ARGLEX_CONVENTION" not in str(exc_info.value)
