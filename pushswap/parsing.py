"""Validation and conversion of command-line arguments into integers."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_SIGNED_NUMBER = re.compile(r"[+-]?[0-9]+")
_LEADING_NUMBER = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")


class InputError(Exception):
    """Raised when the program input is rejected.

    ``silent`` marks the case where the program gives up without
    reporting "Error" (no arguments at all).
    """

    def __init__(self, message: str = "Error", *, silent: bool = False) -> None:
        super().__init__(message)
        self.silent = silent


def check_allowed(arg: str) -> None:
    """Reject an argument that is empty or holds anything but signed numbers and spaces."""
    if not arg:
        raise InputError()
    for word in arg.split(" "):
        if word and not _SIGNED_NUMBER.fullmatch(word):
            raise InputError()


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    return [word for word in text.split(sep) if word]


def to_int(text: str) -> int:
    """Read a leading integer the way atoi does: whitespace, one sign, digits."""
    match = _LEADING_NUMBER.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    return -value if sign == "-" else value


def validate_input(args: Sequence[str]) -> list[str]:
    """Check every argument and return all number tokens they hold, in order."""
    if not args:
        raise InputError("no arguments", silent=True)
    for arg in args:
        check_allowed(arg)
    words = [word for arg in args for word in split_words(arg, " ")]
    if not words:
        raise InputError()
    return words


def check_duplicates(tokens: Iterable[str]) -> None:
    """Reject a token list in which two tokens denote the same number."""
    seen: set[int] = set()
    for word in tokens:
        value = to_int(word)
        if value in seen:
            raise InputError()
        seen.add(value)


def check_overflow(tokens: Iterable[str]) -> None:
    """Reject a token whose value does not fit in a 32-bit signed integer."""
    for word in tokens:
        if not INT_MIN <= to_int(word) <= INT_MAX:
            raise InputError()


def parse_args(args: Sequence[str]) -> list[int]:
    """Validate the arguments and return the numbers they hold."""
    words = validate_input(args)
    check_duplicates(words)
    check_overflow(words)
    return [to_int(word) for word in words]