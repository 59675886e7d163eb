"""Check that a list of instructions read from standard input sorts the stacks."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO

from pushswap.parsing import parse_long
from pushswap.stacks import InvalidInstruction, Stacks

_MAX_LINE = 127


def _to_int32(number: int) -> int:
    """Wrap ``number`` into the signed 32-bit range."""
    return (number + 2**31) % 2**32 - 2**31


def read_instructions(stream: TextIO) -> Iterator[str]:
    """Yield the lines of ``stream`` without their newlines.

    A line longer than 127 characters is yielded in pieces of at most 127.
    Reading stops at end of input; an empty line before the end is yielded.
    """
    while True:
        chars: list[str] = []
        at_end = False
        while len(chars) < _MAX_LINE:
            char = stream.read(1)
            if not char:
                at_end = True
                break
            if char == "\n":
                break
            chars.append(char)
        if not chars and at_end:
            return
        yield "".join(chars)


def run_checker(values: Iterable[int], lines: Iterable[str]) -> bool:
    """Apply ``lines`` to a stack ``a`` holding ``values``; True if it ends sorted.

    Raises :class:`InvalidInstruction` at the first line that is not an
    operation.
    """
    stacks = Stacks(values)
    for line in lines:
        stacks.apply(line)
    return stacks.is_solved()


def main(argv: Sequence[str] | None = None) -> int:
    """Read instructions from standard input and print OK or KO."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    values = [_to_int32(parse_long(arg)) for arg in args]
    try:
        solved = run_checker(values, read_instructions(sys.stdin))
    except InvalidInstruction:
        sys.stderr.write("Error\n")
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("OK\n" if solved else "KO\n")
    return 0