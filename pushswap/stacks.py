"""The two stacks of the puzzle, the eleven instructions and a few measures."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

OPERATIONS = ("sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr")


class InvalidInstruction(ValueError):
    """Raised when an instruction name is not one of the known operations."""


def _swap(stack: list[int]) -> None:
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def _push(src: list[int], dest: list[int]) -> None:
    if src:
        dest.insert(0, src.pop(0))


def _rotate(stack: list[int]) -> None:
    if len(stack) >= 2:
        stack.append(stack.pop(0))


def _reverse_rotate(stack: list[int]) -> None:
    if len(stack) >= 2:
        stack.insert(0, stack.pop())


class Stacks:
    """Stacks ``a`` and ``b``, top first, with a log of the operations done."""

    def __init__(self, a: Iterable[int] = (), b: Iterable[int] = ()) -> None:
        self.a: list[int] = list(a)
        self.b: list[int] = list(b)
        self.ops: list[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={self.a!r}, b={self.b!r})"

    def sa(self) -> None:
        """Swap the two top elements of ``a``."""
        _swap(self.a)
        self.ops.append("sa")

    def sb(self) -> None:
        """Swap the two top elements of ``b``."""
        _swap(self.b)
        self.ops.append("sb")

    def ss(self) -> None:
        """Do ``sa`` and ``sb`` at once."""
        _swap(self.a)
        _swap(self.b)
        self.ops.append("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        _push(self.b, self.a)
        self.ops.append("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        _push(self.a, self.b)
        self.ops.append("pb")

    def ra(self) -> None:
        """Send the top of ``a`` to its bottom."""
        _rotate(self.a)
        self.ops.append("ra")

    def rb(self) -> None:
        """Send the top of ``b`` to its bottom."""
        _rotate(self.b)
        self.ops.append("rb")

    def rr(self) -> None:
        """Do ``ra`` and ``rb`` at once."""
        _rotate(self.a)
        _rotate(self.b)
        self.ops.append("rr")

    def rra(self) -> None:
        """Bring the bottom of ``a`` to its top."""
        _reverse_rotate(self.a)
        self.ops.append("rra")

    def rrb(self) -> None:
        """Bring the bottom of ``b`` to its top."""
        _reverse_rotate(self.b)
        self.ops.append("rrb")

    def rrr(self) -> None:
        """Do ``rra`` and ``rrb`` at once."""
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)
        self.ops.append("rrr")

    def apply(self, name: str) -> None:
        """Perform the operation called ``name``."""
        if name not in OPERATIONS:
            raise InvalidInstruction(name)
        getattr(self, name)()

    def is_solved(self) -> bool:
        """True when ``a`` is in ascending order and ``b`` is empty."""
        return is_sorted(self.a) and not self.b


def is_sorted(values: Sequence[int]) -> bool:
    """True when no element is greater than the one after it."""
    return all(x <= y for x, y in zip(values, values[1:]))


def find_min_index(values: Sequence[int]) -> int:
    """Position of the first smallest element, or -1 for an empty sequence."""
    if not values:
        return -1
    return min(range(len(values)), key=values.__getitem__)


def find_max_index(values: Sequence[int]) -> int:
    """Position of the first largest element, or -1 for an empty sequence."""
    if not values:
        return -1
    return max(range(len(values)), key=values.__getitem__)


def ranks(values: Sequence[int]) -> list[int]:
    """For each element, how many elements are strictly smaller."""
    ordered = sorted(values)
    first_at: dict[int, int] = {}
    for position, value in enumerate(ordered):
        first_at.setdefault(value, position)
    return [first_at[value] for value in values]


def disorder_metric(values: Sequence[int]) -> float:
    """Percentage of pairs that are out of order (inversions over all pairs)."""
    size = len(values)
    if size <= 1:
        return 0.0
    mistakes = sum(
        1
        for i, left in enumerate(values)
        for right in values[i + 1:]
        if left > right
    )
    total = size * (size - 1) // 2
    return mistakes * 100.0 / total