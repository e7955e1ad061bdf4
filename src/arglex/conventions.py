"""Convention selection and the tokenize/serialize façade.

Each convention lives in its own module (:mod:`arglex.posix`,
:mod:`arglex.windows`) and is exposed as a frozen :class:`ConventionCodec`.
The façade only picks one; it never mixes their rules.
"""

from __future__ import annotations

import logging
import platform
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Protocol

from arglex import posix, windows
from arglex.errors import InvalidArgumentError, UnknownConventionError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from types import ModuleType
    from typing import TextIO

log = logging.getLogger(__name__)

NATIVE = "native"


class Convention(StrEnum):
    """Supported quoting conventions."""

    POSIX = "posix"
    WINDOWS = "windows"

    @classmethod
    def native(cls) -> Convention:
        """Return the convention of the running platform."""
        return cls.WINDOWS if platform.system() == "Windows" else cls.POSIX

    @classmethod
    def parse(cls, value: Convention | str) -> Convention:
        """Resolve a convention from an enum member or a case-insensitive name.

        ``"native"`` resolves to :meth:`native`.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().lower()
            if name == NATIVE:
                return cls.native()
            try:
                return cls(name)
            except ValueError:
                pass
        raise UnknownConventionError(value)


class CommandLineCodec(Protocol):
    """Both directions of one convention."""

    def tokenize(self, raw: str) -> list[str]: ...

    def tokenize_into(self, raw: str, destination: list[str]) -> int: ...

    def quote(self, arg: str | None) -> str: ...

    def serialize(self, args: Iterable[str | None]) -> str: ...

    def serialize_into(self, args: Iterable[str | None], destination: TextIO) -> None: ...


@dataclass(frozen=True, slots=True)
class ConventionCodec:
    """One convention's functions bundled behind the :class:`CommandLineCodec` surface."""

    convention: Convention
    tokenize: Callable[[str], list[str]]
    tokenize_into: Callable[[str, list[str]], int]
    quote: Callable[[str | None], str]
    serialize: Callable[[Iterable[str | None]], str]
    serialize_into: Callable[[Iterable[str | None], TextIO], None]


def _codec_for(convention: Convention, module: ModuleType) -> ConventionCodec:
    return ConventionCodec(
        convention=convention,
        tokenize=module.tokenize,
        tokenize_into=module.tokenize_into,
        quote=module.quote,
        serialize=module.serialize,
        serialize_into=module.serialize_into,
    )


POSIX_CODEC = _codec_for(Convention.POSIX, posix)
WINDOWS_CODEC = _codec_for(Convention.WINDOWS, windows)

_CODECS: dict[Convention, CommandLineCodec] = {
    Convention.POSIX: POSIX_CODEC,
    Convention.WINDOWS: WINDOWS_CODEC,
}


def get_codec(convention: Convention | str) -> CommandLineCodec:
    """Return the codec implementing *convention*."""
    if convention is None:
        raise InvalidArgumentError("convention")
    resolved = Convention.parse(convention)
    log.debug("Using %s command-line convention", resolved)
    return _CODECS[resolved]


def tokenize(convention: Convention | str, raw: str) -> list[str]:
    """Split *raw* into arguments under *convention*."""
    return get_codec(convention).tokenize(raw)


def tokenize_into(convention: Convention | str, raw: str, destination: list[str]) -> int:
    """Append the arguments of *raw* to *destination*; return how many were added."""
    return get_codec(convention).tokenize_into(raw, destination)


def quote(convention: Convention | str, arg: str | None) -> str:
    return get_codec(convention).quote(arg)


def serialize(convention: Convention | str, args: Iterable[str | None]) -> str:
    """Join *args* into a command line that tokenizes back to the same list."""
    return get_codec(convention).serialize(args)


def serialize_into(
    convention: Convention | str, args: Iterable[str | None], destination: TextIO
) -> None:
    get_codec(convention).serialize_into(args, destination)


def _default_convention() -> Convention:
    from arglex.config import ArglexConfig

    return ArglexConfig.load().default_convention()


def split(raw: str, convention: Convention | str | None = None) -> list[str]:
    """Tokenize using *convention*, or the configured default when omitted.

    Raises:
        ConfigError: If *convention* is omitted and the config file or
            ``ARGLEX_CONVENTION`` cannot be read or validated.
        InvalidArgumentError: If *raw* is None or not a string.
    """
    if convention is None:
        convention = _default_convention()
    return tokenize(convention, raw)


def join(args: Iterable[str | None], convention: Convention | str | None = None) -> str:
    """Serialize using *convention*, or the configured default when omitted.

    Raises:
        ConfigError: If *convention* is omitted and the config file or
            ``ARGLEX_CONVENTION`` cannot be read or validated.
        InvalidArgumentError: If *args* is None, a bare string, or holds a
            non-string entry.
    """
    if convention is None:
        convention = _default_convention()
    return serialize(convention, args)
