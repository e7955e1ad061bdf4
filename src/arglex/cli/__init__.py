"""Command-line entry points for arglex."""

from arglex.cli.root import cli

__all__ = ["cli"]
