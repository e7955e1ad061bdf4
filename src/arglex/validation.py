"""Input validation run before any scanning or encoding starts."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from arglex.errors import InvalidArgumentError


def require_text(value: object, name: str = "raw") -> str:
    """Return *value* if it is a string, else raise InvalidArgumentError."""
    if value is None:
        raise InvalidArgumentError(name)
    if not isinstance(value, str):
        msg = f"{name} must be str, not {type(value).__name__}"
        raise InvalidArgumentError(name, msg)
    return value


def require_destination(value: Any, name: str = "destination") -> Any:
    if value is None:
        raise InvalidArgumentError(name)
    return value


def require_arguments(args: object, name: str = "args") -> Iterable[str | None]:
    """Check that *args* is an iterable of arguments rather than a single string.

    Lists and tuples are checked element by element up front so that a bad
    entry is reported before anything is written. Other iterables are left
    for :func:`iter_arguments` to check lazily.
    """
    if args is None:
        raise InvalidArgumentError(name)
    if isinstance(args, (str, bytes, bytearray)):
        msg = f"{name} must be a sequence of arguments, not a single {type(args).__name__}"
        raise InvalidArgumentError(name, msg)
    if isinstance(args, (list, tuple)):
        for index, arg in enumerate(args):
            _check_element(arg, index, name)
        return args
    if not isinstance(args, Iterable):
        msg = f"{name} must be iterable, not {type(args).__name__}"
        raise InvalidArgumentError(name, msg)
    return args


def iter_arguments(args: Iterable[str | None], name: str = "args") -> Iterator[str]:
    """Yield each argument as a string, with None standing for the empty argument."""
    if isinstance(args, (list, tuple)):
        # Already checked by require_arguments.
        for index in range(len(args)):
            yield args[index] or ""
        return
    for index, arg in enumerate(args):
        _check_element(arg, index, name)
        yield arg or ""


def _check_element(arg: object, index: int, name: str) -> None:
    if arg is not None and not isinstance(arg, str):
        msg = f"{name}[{index}] must be str or None, not {type(arg).__name__}"
        raise InvalidArgumentError(name, msg)
