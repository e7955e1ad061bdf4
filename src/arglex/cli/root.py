"""Root CLI command registration."""

from __future__ import annotations

import click

from arglex import __version__
from arglex.debug_log import debug_enabled_from_env, setup_debug_logging

from .config_cmd import config
from .lex import join_cmd, split_cmd


@click.group()
@click.version_option(__version__, prog_name="arglex")
@click.option("--debug", is_flag=True, help="Log debug output to stderr")
def cli(debug: bool) -> None:
    """Split and join command lines using POSIX or Windows quoting rules."""
    if debug or debug_enabled_from_env():
        setup_debug_logging()


cli.add_command(split_cmd)
cli.add_command(join_cmd)
cli.add_command(config)
