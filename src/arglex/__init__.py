"""arglex: split and join command lines under POSIX or Windows quoting rules."""

__version__ = "0.1.0"

from arglex.conventions import (  # noqa: E402
    POSIX_CODEC,
    WINDOWS_CODEC,
    CommandLineCodec,
    Convention,
    ConventionCodec,
    get_codec,
    join,
    quote,
    serialize,
    serialize_into,
    split,
    tokenize,
    tokenize_into,
)
from arglex.errors import (  # noqa: E402
    ArglexError,
    ConfigError,
    InvalidArgumentError,
    UnknownConventionError,
)

__all__ = [
    "ArglexError",
    "CommandLineCodec",
    "ConfigError",
    "Convention",
    "ConventionCodec",
    "InvalidArgumentError",
    "POSIX_CODEC",
    "UnknownConventionError",
    "WINDOWS_CODEC",
    "get_codec",
    "join",
    "quote",
    "serialize",
    "serialize_into",
    "split",
    "tokenize",
    "tokenize_into",
]
