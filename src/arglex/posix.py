"""POSIX-shell quoting subset: tokenizer and minimal-quoting serializer.

Only quoting and escaping are understood. There is no expansion, globbing,
command substitution or redirection. Inside double quotes a backslash
escapes only ``"`` and ``\\``; any other backslash there is kept literally.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from arglex.chars import (
    BACKSLASH,
    DOUBLE_QUOTE,
    SINGLE_QUOTE,
    is_posix_safe_bareword,
    is_posix_whitespace,
)
from arglex.validation import (
    iter_arguments,
    require_arguments,
    require_destination,
    require_text,
)

if TYPE_CHECKING:
    from collections.abc import Iterable
    from typing import TextIO

# Closes the current single-quoted run, emits a double-quoted ', reopens.
EMBEDDED_SINGLE_QUOTE = "'\"'\"'"
EMPTY_ARGUMENT = "''"

_DOUBLE_QUOTE_ESCAPABLE = frozenset((DOUBLE_QUOTE, BACKSLASH))


def tokenize(raw: str) -> list[str]:
    """Split a POSIX-style command line into arguments.

    Args:
        raw: The command line. An empty or all-whitespace string yields no tokens.

    Returns:
        The arguments in order. Unterminated quotes are tolerated and the
        text collected so far becomes the last argument.

    Raises:
        InvalidArgumentError: If *raw* is None or not a string.
    """
    destination: list[str] = []
    _scan(require_text(raw), destination)
    return destination


def tokenize_into(raw: str, destination: list[str]) -> int:
    """Append the arguments of *raw* to *destination* and return how many were added."""
    text = require_text(raw)
    require_destination(destination)
    before = len(destination)
    _scan(text, destination)
    return len(destination) - before


def _scan(raw: str, out: list[str]) -> None:
    i = 0
    length = len(raw)
    while i < length:
        while i < length and is_posix_whitespace(raw[i]):
            i += 1
        if i >= length:
            break

        token: list[str] = []
        in_single = False
        in_double = False

        while i < length:
            ch = raw[i]

            if not in_single and not in_double and is_posix_whitespace(ch):
                break

            if not in_double and ch == SINGLE_QUOTE:
                in_single = not in_single
                i += 1
                continue

            if not in_single and ch == DOUBLE_QUOTE:
                in_double = not in_double
                i += 1
                continue

            if not in_single and ch == BACKSLASH:
                i += 1
                if i >= length:
                    # Trailing lone backslash stays literal.
                    token.append(BACKSLASH)
                    break
                escaped = raw[i]
                if in_double and escaped not in _DOUBLE_QUOTE_ESCAPABLE:
                    token.append(BACKSLASH)
                token.append(escaped)
                i += 1
                continue

            token.append(ch)
            i += 1

        out.append("".join(token))


def quote(arg: str | None) -> str:
    """Encode a single argument with the least quoting that survives tokenize().

    ``None`` and the empty string both encode as ``''``.
    """
    if arg is None:
        return EMPTY_ARGUMENT
    text = require_text(arg, "arg")
    if not text:
        return EMPTY_ARGUMENT
    if is_posix_safe_bareword(text):
        return text
    if SINGLE_QUOTE not in text:
        return f"'{text}'"
    return SINGLE_QUOTE + text.replace(SINGLE_QUOTE, EMBEDDED_SINGLE_QUOTE) + SINGLE_QUOTE


def serialize(args: Iterable[str | None]) -> str:
    """Join *args* into one command line, quoting each argument as needed.

    Raises:
        InvalidArgumentError: If *args* is None, a bare string, or holds a
            non-string entry.
    """
    checked = require_arguments(args)
    return " ".join(quote(arg) for arg in iter_arguments(checked))


def serialize_into(args: Iterable[str | None], destination: TextIO) -> None:
    """Write the serialized command line for *args* to a text stream."""
    checked = require_arguments(args)
    require_destination(destination)
    # Encode fully before writing so a bad entry never leaves partial output.
    encoded = " ".join(quote(arg) for arg in iter_arguments(checked))
    destination.write(encoded)
