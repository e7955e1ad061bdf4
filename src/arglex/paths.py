"""Config path helpers for arglex."""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_config_dir

CONFIG_FILENAME = "config.toml"


def get_config_dir() -> Path:
    """Get the config directory, honouring ``ARGLEX_CONFIG_DIR``."""
    override = os.environ.get("ARGLEX_CONFIG_DIR")
    if override:
        return Path(override)
    return Path(user_config_dir("arglex"))


def get_config_path() -> Path:
    return get_config_dir() / CONFIG_FILENAME
