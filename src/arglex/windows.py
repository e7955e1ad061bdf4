"""Windows/MSVC command-line convention (CommandLineToArgvW style).

Backslashes are literal unless they run up to a double quote. A run of
``k`` backslashes before ``"`` produces ``k // 2`` backslashes; an odd run
also produces a literal quote, an even run lets the quote toggle quoting.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from arglex.chars import BACKSLASH, DOUBLE_QUOTE, is_windows_whitespace, needs_windows_quoting
from arglex.validation import (
    iter_arguments,
    require_arguments,
    require_destination,
    require_text,
)

if TYPE_CHECKING:
    from collections.abc import Iterable
    from typing import TextIO

EMPTY_ARGUMENT = '""'


def tokenize(raw: str) -> list[str]:
    """Split a Windows-style command line into arguments.

    Unterminated quotes are tolerated: the text collected so far becomes the
    last argument.

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


def _skip_whitespace(raw: str, i: int) -> int:
    length = len(raw)
    while i < length and is_windows_whitespace(raw[i]):
        i += 1
    return i


def _scan(raw: str, out: list[str]) -> None:
    length = len(raw)
    i = _skip_whitespace(raw, 0)

    while i < length:
        token: list[str] = []
        in_quotes = False

        while i < length:
            ch = raw[i]

            if not in_quotes and is_windows_whitespace(ch):
                break

            if ch == DOUBLE_QUOTE:
                in_quotes = not in_quotes
                i += 1
                continue

            if ch == BACKSLASH:
                start = i
                while i < length and raw[i] == BACKSLASH:
                    i += 1
                run = i - start

                if i < length and raw[i] == DOUBLE_QUOTE:
                    token.append(BACKSLASH * (run // 2))
                    if run % 2:
                        token.append(DOUBLE_QUOTE)
                    else:
                        in_quotes = not in_quotes
                    i += 1
                else:
                    token.append(BACKSLASH * run)
                continue

            token.append(ch)
            i += 1

        out.append("".join(token))
        i = _skip_whitespace(raw, i)


def quote(arg: str | None) -> str:
    """Encode a single argument so that tokenize() reads it back unchanged.

    Arguments without whitespace or quotes are returned as-is. Everything
    else is wrapped in double quotes; backslashes are doubled only where
    they precede an embedded quote or the closing quote.
    """
    if arg is None:
        return EMPTY_ARGUMENT
    text = require_text(arg, "arg")
    if not needs_windows_quoting(text):
        return text

    parts = [DOUBLE_QUOTE]
    pending = 0
    for ch in text:
        if ch == BACKSLASH:
            pending += 1
            continue
        if ch == DOUBLE_QUOTE:
            parts.append(BACKSLASH * (pending * 2 + 1))
            parts.append(DOUBLE_QUOTE)
        else:
            if pending:
                parts.append(BACKSLASH * pending)
            parts.append(ch)
        pending = 0

    if pending:
        parts.append(BACKSLASH * (pending * 2))
    parts.append(DOUBLE_QUOTE)
    return "".join(parts)


def serialize(args: Iterable[str | None]) -> str:
    """Join *args* into one Windows command line.

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
    destination.write(" ".join(quote(arg) for arg in iter_arguments(checked)))
