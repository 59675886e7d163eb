"""Reading the numbers given on the command line and writing operations out."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_LEADING_SPACE = " \t\n\v\f\r"


class InputError(ValueError):
    """Raised when the numbers given cannot form stack ``a``."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


def parse_long(text: str) -> int:
    """Read an optionally signed run of digits after leading white space.

    Reading stops at the first character that is not a digit; text with no
    digits reads as 0.
    """
    rest = text.lstrip(_LEADING_SPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if not "0" <= char <= "9":
            break
        digits.append(char)
    return sign * int("".join(digits)) if digits else 0


def split_words(text: str, sep: str = " ") -> list[str]:
    """Split ``text`` on ``sep``, dropping the empty pieces."""
    return [word for word in text.split(sep) if word]


def validate_arguments(args: Iterable[str]) -> None:
    """Raise :class:`InputError` for a number out of int range or repeated."""
    seen: set[int] = set()
    for arg in args:
        number = parse_long(arg)
        if number < INT_MIN or number > INT_MAX:
            raise InputError("overflow")
        if number in seen:
            raise InputError("duplicate")
        seen.add(number)


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Validate the arguments and return them as the contents of stack ``a``."""
    validate_arguments(args)
    return [parse_long(arg) for arg in args]


def format_operations(ops: Iterable[str]) -> str:
    """One operation per line, each line ending in a newline."""
    return "".join(f"{op}\n" for op in ops)