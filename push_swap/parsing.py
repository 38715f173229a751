"""Reading and checking the numbers given on the command line."""

from __future__ import annotations

from collections.abc import Sequence

INT_MAX = 2147483647
INT_MIN = -2147483648

_WHITESPACE = "\t\n\v\f\r "
_DIGITS = "0123456789"


class InputError(ValueError):
    """Raised when the arguments are not a list of distinct integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def is_valid_number(text: str) -> bool:
    """Return whether ``text`` is optional whitespace, an optional sign and digits."""
    body = text.lstrip(_WHITESPACE)
    if body[:1] in ("+", "-"):
        body = body[1:]
    return bool(body) and all(char in _DIGITS for char in body)


def atoi_long(text: str) -> int:
    """Read a leading integer from ``text``, stopping once it passes 2**31."""
    body = text.lstrip(_WHITESPACE)
    sign = 1
    if body[:1] in ("+", "-"):
        if body[0] == "-":
            sign = -1
        body = body[1:]
    result = 0
    for char in body:
        if char not in _DIGITS or result >= INT_MAX + 1:
            break
        result = result * 10 + int(char)
    return result * sign


def split_words(text: str, separator: str = " ") -> list[str]:
    """Split ``text`` on ``separator``, dropping empty words."""
    if not separator:
        raise ValueError("empty separator")
    return [word for word in text.split(separator) if word]


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn the arguments into integers, top of the stack first.

    A single argument is split on spaces. Raises InputError when there is
    nothing to read, a word is not an integer, it is out of the 32-bit range,
    or a value repeats.
    """
    if not args:
        raise InputError()
    words = split_words(args[0], " ") if len(args) == 1 else list(args)
    if not words:
        raise InputError()
    numbers: list[int] = []
    seen: set[int] = set()
    for word in words:
        value = atoi_long(word)
        if not INT_MIN <= value <= INT_MAX:
            raise InputError()
        if not is_valid_number(word) or value in seen:
            raise InputError()
        seen.add(value)
        numbers.append(value)
    return numbers