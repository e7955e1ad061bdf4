"""``split`` and ``join`` commands."""

from __future__ import annotations

import json

import click

from arglex.config import ArglexConfig
from arglex.conventions import Convention, serialize, tokenize
from arglex.errors import ArglexError, ConfigError

CONVENTION_CHOICES = ("posix", "windows", "native")
FORMAT_CHOICES = ("lines", "json", "null")

convention_option = click.option(
    "-c",
    "--convention",
    type=click.Choice(CONVENTION_CHOICES, case_sensitive=False),
    default=None,
    help="Quoting convention (defaults to the configured one)",
)


def _load_config() -> ArglexConfig:
    try:
        return ArglexConfig.load()
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc


def _resolve_convention(name: str | None, cfg: ArglexConfig) -> Convention:
    if name is None:
        return cfg.default_convention()
    return Convention.parse(name)


@click.command("split")
@click.argument("command_line", required=False, default=None)
@convention_option
@click.option(
    "-f",
    "--format",
    "output_format",
    type=click.Choice(FORMAT_CHOICES, case_sensitive=False),
    default=None,
    help="Output format (defaults to the configured one)",
)
def split_cmd(command_line: str | None, convention: str | None, output_format: str | None) -> None:
    """Split COMMAND_LINE into arguments, one per line.

    \b
    Reads the command line from stdin when COMMAND_LINE is omitted.

    \b
    Examples:
        arglex split "cp 'my file' dest/"
        arglex split -c windows '"C:\\Program Files\\app.exe" /quiet'
        echo "a 'b c'" | arglex split -f json
    """
    cfg = _load_config()
    if command_line is None:
        command_line = click.get_text_stream("stdin").read()

    try:
        tokens = tokenize(_resolve_convention(convention, cfg), command_line)
    except ArglexError as exc:
        raise click.ClickException(str(exc)) from exc

    fmt = (output_format or cfg.output.format).lower()
    if fmt == "json":
        click.echo(json.dumps(tokens))
    elif fmt == "null":
        click.echo("".join(f"{token}\0" for token in tokens), nl=False)
    else:
        for token in tokens:
            click.echo(token)


@click.command("join")
@click.argument("args", nargs=-1)
@convention_option
def join_cmd(args: tuple[str, ...], convention: str | None) -> None:
    """Join ARGS into a single quoted command line.

    \b
    Put "--" before arguments that start with a dash:
        arglex join -- ls -la "my dir"
    """
    cfg = _load_config()
    try:
        line = serialize(_resolve_convention(convention, cfg), args)
    except ArglexError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(line)
