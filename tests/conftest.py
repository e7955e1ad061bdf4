"""Pytest fixtures for arglex tests."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from hypothesis import Phase, Verbosity, settings

_TEST_BASE_DIR = Path(tempfile.mkdtemp(prefix="arglex-tests-"))
os.environ["ARGLEX_CONFIG_DIR"] = str(_TEST_BASE_DIR / "config")
os.environ.pop("ARGLEX_CONVENTION", None)
os.environ.pop("ARGLEX_DEBUG", None)

if TYPE_CHECKING:
    from collections.abc import Callable

    from pytest import MonkeyPatch


settings.register_profile(
    "ci",
    max_examples=300,
    deadline=None,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
)
settings.register_profile(
    "dev",
    max_examples=100,
    deadline=500,
)
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    deadline=None,
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture
def config_dir(tmp_path: Path, monkeypatch: MonkeyPatch) -> Path:
    """Point ARGLEX_CONFIG_DIR at a fresh directory for one test."""
    path = tmp_path / "config"
    monkeypatch.setenv("ARGLEX_CONFIG_DIR", str(path))
    monkeypatch.delenv("ARGLEX_CONVENTION", raising=False)
    return path


@pytest.fixture
def mock_platform_system(monkeypatch: MonkeyPatch) -> Callable[[str], None]:
    """Return a setter that fakes ``platform.system()``."""

    def _set(name: str) -> None:
        monkeypatch.setattr("platform.system", lambda: name)

    return _set
