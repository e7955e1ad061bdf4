"""Character-class predicates shared by the POSIX and Windows conventions.

Each convention reads only its own predicates; nothing here carries state.
"""

from __future__ import annotations

POSIX_SAFE_PUNCTUATION = frozenset("_-./:@+")
WINDOWS_WHITESPACE = frozenset(" \t\r\n")

SINGLE_QUOTE = "'"
DOUBLE_QUOTE = '"'
BACKSLASH = "\\"


def is_posix_whitespace(ch: str) -> bool:
    """Return True for any Unicode whitespace character."""
    return ch.isspace()


def is_windows_whitespace(ch: str) -> bool:
    """Return True for space, tab, CR and LF only."""
    return ch in WINDOWS_WHITESPACE


def is_posix_safe_char(ch: str) -> bool:
    return ch.isalnum() or ch in POSIX_SAFE_PUNCTUATION


def is_posix_safe_bareword(arg: str) -> bool:
    """Return True when *arg* can be written unquoted under POSIX rules.

    The safe set is deliberately conservative: letters, digits and
    ``_ - . / : @ +``. The empty string is never a bareword.
    """
    if not arg:
        return False
    return all(is_posix_safe_char(ch) for ch in arg)


def needs_windows_quoting(arg: str) -> bool:
    """Return True when *arg* must be wrapped in double quotes."""
    if not arg:
        return True
    return any(ch == DOUBLE_QUOTE or ch in WINDOWS_WHITESPACE for ch in arg)
