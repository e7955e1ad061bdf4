"""``config`` command group."""

from __future__ import annotations

import click

from arglex.config import ArglexConfig
from arglex.errors import ConfigError
from arglex.paths import get_config_path

from .lex import CONVENTION_CHOICES, FORMAT_CHOICES


@click.group()
def config() -> None:
    """Inspect or change the arglex configuration."""


@config.command("show")
def show() -> None:
    """Print the config file location and effective settings."""
    path = get_config_path()
    try:
        cfg = ArglexConfig.load(path)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(f"path: {path}{'' if path.exists() else ' (not created)'}")
    click.echo(f"convention: {cfg.convention} ({cfg.default_convention()})")
    click.echo(f"output.format: {cfg.output.format}")


@config.command("set")
@click.option("--convention", type=click.Choice(CONVENTION_CHOICES, case_sensitive=False))
@click.option("--format", "output_format", type=click.Choice(FORMAT_CHOICES, case_sensitive=False))
def set_values(convention: str | None, output_format: str | None) -> None:
    """Update settings in the config file."""
    if convention is None and output_format is None:
        raise click.UsageError("Nothing to set: pass --convention and/or --format")

    path = get_config_path()
    try:
        cfg = ArglexConfig.load(path)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    if convention is not None:
        cfg.convention = convention.lower()  # type: ignore[assignment]
    if output_format is not None:
        cfg.output.format = output_format.lower()  # type: ignore[assignment]

    written = cfg.save(path)
    click.secho(f"Saved {written}", fg="green")
