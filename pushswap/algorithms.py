"""Sorting strategies that solve the puzzle with the stack operations."""

from __future__ import annotations

from pushswap.stacks import (
    Stacks,
    disorder_metric,
    find_max_index,
    find_min_index,
    is_sorted,
    ranks,
)


def _rank_of(values: list[int]) -> dict[int, int]:
    return dict(zip(values, ranks(values)))


def _bring_min_to_top_and_push(stacks: Stacks) -> None:
    pos = find_min_index(stacks.a)
    size = len(stacks.a)
    if pos <= size // 2:
        for _ in range(pos):
            stacks.ra()
    else:
        for _ in range(size - pos):
            stacks.rra()
    stacks.pb()


def sort_two(stacks: Stacks) -> None:
    """Swap the top two of ``a`` when they are out of order."""
    a = stacks.a
    if len(a) >= 2 and a[0] > a[1]:
        stacks.sa()


def sort_three(stacks: Stacks) -> None:
    """Order the top three elements of ``a`` with at most two operations."""
    if len(stacks.a) < 3:
        raise ValueError("sort_three needs at least three elements in a")
    top, mid, bot = stacks.a[:3]
    if top > mid and mid < bot and top < bot:
        stacks.sa()
    elif top > mid and mid > bot:
        stacks.sa()
        stacks.rra()
    elif top > mid and mid < bot and top > bot:
        stacks.ra()
    elif top < mid and mid > bot and top < bot:
        stacks.sa()
        stacks.ra()
    elif top < mid and mid > bot and top > bot:
        stacks.rra()


def sort_five(stacks: Stacks) -> None:
    """Push the smallest elements to ``b`` until three remain, then merge back."""
    while len(stacks.a) > 3:
        _bring_min_to_top_and_push(stacks)
    sort_three(stacks)
    while stacks.b:
        stacks.pa()


def sort_simple(stacks: Stacks) -> None:
    """Selection sort: repeatedly move the minimum of ``a`` onto ``b``."""
    if not stacks.a or is_sorted(stacks.a):
        return
    if len(stacks.a) < 3:
        sort_two(stacks)
        return
    while len(stacks.a) > 3:
        _bring_min_to_top_and_push(stacks)
    sort_three(stacks)
    while stacks.b:
        stacks.pa()


def _push_chunks_to_b(stacks: Stacks, chunk: int) -> None:
    rank_of = _rank_of(stacks.a)
    pushed = 0
    while stacks.a:
        index = rank_of[stacks.a[0]]
        if index <= pushed:
            stacks.pb()
            stacks.rb()
            pushed += 1
        elif index <= pushed + chunk:
            stacks.pb()
            pushed += 1
        else:
            stacks.ra()


def _push_max_to_a(stacks: Stacks) -> None:
    pos = find_max_index(stacks.b)
    size = len(stacks.b)
    if pos <= size // 2:
        for _ in range(pos):
            stacks.rb()
    else:
        for _ in range(size - pos):
            stacks.rrb()
    stacks.pa()


def sort_medium(stacks: Stacks) -> None:
    """Chunk sort: send ``a`` to ``b`` by rank ranges, then pull maxima back."""
    if not stacks.a or is_sorted(stacks.a):
        return
    chunk = 15 if len(stacks.a) <= 100 else 30
    _push_chunks_to_b(stacks, chunk)
    while stacks.b:
        _push_max_to_a(stacks)


def _bits_needed(n: int) -> int:
    bits = 0
    while (1 << bits) < n:
        bits += 1
    return bits


def sort_complex(stacks: Stacks) -> None:
    """Binary radix sort on the ranks of the elements of ``a``."""
    size = len(stacks.a)
    if size < 2 or is_sorted(stacks.a):
        return
    if size == 2:
        sort_two(stacks)
        return
    if size == 3:
        sort_three(stacks)
        return
    if size <= 5:
        sort_five(stacks)
        return
    rank_of = _rank_of(stacks.a)
    for bit in range(_bits_needed(size)):
        for _ in range(len(stacks.a)):
            if (rank_of[stacks.a[0]] >> bit) & 1:
                stacks.ra()
            else:
                stacks.pb()
        while stacks.b:
            stacks.pa()


def sort_adaptive(stacks: Stacks) -> None:
    """Pick a strategy from the size of ``a`` and how disordered it is."""
    if not stacks.a or is_sorted(stacks.a):
        return
    size = len(stacks.a)
    if size == 2:
        sort_two(stacks)
        return
    if size == 3:
        sort_three(stacks)
        return
    if size <= 5:
        sort_five(stacks)
        return
    mistakes = int(disorder_metric(stacks.a))
    if mistakes < 20:
        sort_simple(stacks)
    elif mistakes < 50:
        sort_medium(stacks)
    else:
        sort_complex(stacks)


def sort_with_flag(stacks: Stacks, flag: str) -> list[str]:
    """Sort with the strategy a command-line flag names; return the operations."""
    start = len(stacks.ops)
    if flag == "--simple":
        sort_simple(stacks)
    elif flag == "--medium":
        sort_medium(stacks)
    elif flag == "--complex":
        sort_complex(stacks)
    else:
        sort_adaptive(stacks)
    return stacks.ops[start:]