"""Exception hierarchy for arglex."""

from __future__ import annotations


class ArglexError(Exception):
    """Base class for all arglex errors."""


class InvalidArgumentError(ArglexError, ValueError):
    """Raised when a tokenize/serialize call receives a missing or mistyped input."""

    def __init__(self, name: str, message: str | None = None) -> None:
        self.name = name
        super().__init__(message or f"{name} must not be None")


class UnknownConventionError(ArglexError, ValueError):
    """Raised when a convention name cannot be resolved."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"Unknown command-line convention: {value!r} (expected 'posix', 'windows' or 'native')"
        )


class ConfigError(ArglexError):
    """Raised when the configuration file cannot be read or validated."""
