"""Tests for character-class predicates."""

from __future__ import annotations

import pytest

from arglex.chars import (
    is_posix_safe_bareword,
    is_posix_whitespace,
    is_windows_whitespace,
    needs_windows_quoting,
)

pytestmark = pytest.mark.unit


@pytest.mark.parametrize("ch", [" ", "\t", "\n", "\r", "\x0b", "\x0c", "\u00a0", "\u2003"])
def test_posix_whitespace(ch: str) -> None:
    assert is_posix_whitespace(ch)


@pytest.mark.parametrize("ch", [" ", "\t", "\r", "\n"])
def test_windows_whitespace(ch: str) -> None:
    assert is_windows_whitespace(ch)


@pytest.mark.parametrize("ch", ["\x0b", "\x0c", "\u00a0", "a", '"'])
def test_not_windows_whitespace(ch: str) -> None:
    assert not is_windows_whitespace(ch)


@pytest.mark.parametrize("arg", ["abc", "A-Z_0.9", "/usr/bin", "a:b@c+d", "ñandú"])
def test_posix_safe_barewords(arg: str) -> None:
    assert is_posix_safe_bareword(arg)


@pytest.mark.parametrize("arg", ["", "a b", "it's", 'x"', "a\\b", "$HOME", "a=b", "*", "~"])
def test_posix_unsafe_barewords(arg: str) -> None:
    assert not is_posix_safe_bareword(arg)


@pytest.mark.parametrize(
    ("arg", "expected"),
    [
        ("", True),
        ("a b", True),
        ("a\tb", True),
        ('a"b', True),
        ("a\\b", False),
        ("it's", False),
        ("a\u00a0b", False),
    ],
)
def test_needs_windows_quoting(arg: str, expected: bool) -> None:
    assert needs_windows_quoting(arg) is expected
