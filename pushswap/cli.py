"""Command that prints the operations sorting the numbers it is given."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.algorithms import sort_with_flag
from pushswap.parsing import InputError, format_operations, parse_arguments, split_words
from pushswap.stacks import Stacks


def solve(args: Sequence[str]) -> list[str]:
    """Return the operations that sort the numbers in ``args``.

    ``args`` are the command-line arguments without the program name. A
    single argument is split on spaces; a first argument starting with
    ``--`` names the strategy and the numbers follow it. Raises
    :class:`InputError` for invalid numbers.
    """
    if not args:
        return []
    first = args[0]
    if first.startswith("--"):
        numbers = list(args[1:])
    elif len(args) == 1:
        numbers = split_words(first, " ")
    else:
        numbers = list(args)
    values = parse_arguments(numbers)
    return sort_with_flag(Stacks(values), first)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the sorting operations, one per line."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        ops = solve(args)
    except InputError as exc:
        sys.stderr.write(f"{exc.reason}\n")
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write(format_operations(ops))
    return 0