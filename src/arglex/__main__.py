"""CLI entry point for arglex."""

from __future__ import annotations

from arglex.cli import cli

if __name__ == "__main__":
    cli()
