"""Configuration loader for arglex."""

from __future__ import annotations

import logging
import os
import tempfile
import tomllib
from pathlib import Path
from typing import Literal

import tomlkit
from pydantic import BaseModel, Field, ValidationError, field_validator

from arglex.conventions import Convention
from arglex.errors import ConfigError
from arglex.paths import get_config_path

log = logging.getLogger(__name__)

type ConventionName = Literal["posix", "windows", "native"]
type OutputFormat = Literal["lines", "json", "null"]

CONVENTION_ENV_VAR = "ARGLEX_CONVENTION"


class OutputConfig(BaseModel):
    """How the ``split`` command prints tokens."""

    format: OutputFormat = Field(
        default="lines",
        description="One token per line, a JSON array, or NUL-terminated tokens",
    )


class ArglexConfig(BaseModel):
    """Root configuration model."""

    convention: ConventionName = Field(
        default="native",
        description="Default convention for split/join when none is given",
    )
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("convention", mode="before")
    @classmethod
    def normalize_convention(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @classmethod
    def load(cls, config_path: Path | None = None) -> ArglexConfig:
        """Load configuration from TOML file or use defaults.

        ``ARGLEX_CONVENTION`` overrides the ``convention`` key.

        Raises:
            ConfigError: If the file is not valid TOML or fails validation.
        """
        if config_path is None:
            config_path = get_config_path()

        data: dict[str, object] = {}
        if config_path.exists():
            log.debug("Loading config from %s", config_path)
            try:
                with open(config_path, "rb") as f:
                    data = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as exc:
                msg = f"Cannot read config file {config_path}: {exc}"
                raise ConfigError(msg) from exc

        env_convention = os.environ.get(CONVENTION_ENV_VAR)
        if env_convention:
            data = {**data, "convention": env_convention}

        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            source = str(config_path)
            if env_convention and any(err["loc"][:1] == ("convention",) for err in exc.errors()):
                source = f"environment variable {CONVENTION_ENV_VAR}={env_convention!r}"
            msg = f"Invalid configuration in {source}: {exc}"
            raise ConfigError(msg) from exc

    def default_convention(self) -> Convention:
        """Resolve the configured convention, mapping ``native`` to the platform's."""
        return Convention.parse(self.convention)

    def save(self, path: Path | None = None) -> Path:
        """Write the config as TOML, replacing the target file atomically.

        Returns:
            The path written.
        """
        if path is None:
            path = get_config_path()

        doc = tomlkit.document()
        doc["convention"] = self.convention
        output_table = tomlkit.table()
        for key, value in self.output.model_dump().items():
            output_table[key] = value
        doc["output"] = output_table

        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=".tmp_")
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(tomlkit.dumps(doc))
            tmp_path.replace(path)
        except Exception:
            tmp_path.unlink(missing_ok=True)
            raise
        log.debug("Saved config to %s", path)
        return path
