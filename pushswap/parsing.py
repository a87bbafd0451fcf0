"""Reading the numbers of the puzzle from command-line arguments."""

from __future__ import annotations

from collections.abc import Iterable

INT_MAX = 2147483647
_MAX_LENGTH = 11
_DIGITS = frozenset("0123456789")
_BLANKS = frozenset("\t\n\v\f\r ")


class ParseError(ValueError):
    """Raised when the arguments do not describe a valid starting stack."""


def parse_number(text: str) -> int:
    """Return the value of one argument made of decimal digits only.

    Signs and blanks are refused, as are texts longer than eleven characters
    and values above ``INT_MAX``. An empty text stands for ``INT_MAX``.
    """
    if not all(char in _DIGITS for char in text):
        raise ParseError(f"not a plain decimal number: {text!r}")
    if len(text) > _MAX_LENGTH:
        raise ParseError(f"number too long: {text!r}")
    if not text:
        return INT_MAX
    value = int(text)
    if value > INT_MAX:
        raise ParseError(f"number out of range: {text!r}")
    return value


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Return the values of ``args`` in order, refusing duplicates."""
    values = [parse_number(arg) for arg in args]
    seen: set[int] = set()
    for value in values:
        if value in seen:
            raise ParseError(f"duplicate value: {value}")
        seen.add(value)
    return values


def _atoi(text: str) -> int:
    """Read a leading, optionally signed integer the way ``atoi`` does."""
    position = 0
    while position < len(text) and text[position] in _BLANKS:
        position += 1
    sign = 1
    if position < len(text) and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1
    result = 0
    while position < len(text) and text[position] in _DIGITS:
        result = result * 10 + int(text[position])
        position += 1
    return sign * result


def sorted_values(args: Iterable[str]) -> list[int]:
    """Return the integer values of ``args`` in ascending order."""
    return sorted(_atoi(arg) for arg in args)