import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pushswap.algorithms import (
    sort_adaptive,
    sort_complex,
    sort_five,
    sort_medium,
    sort_simple,
    sort_three,
    sort_two,
    sort_with_flag,
)
from pushswap.stacks import Stacks


def _replays_to_solution(values, ops):
    replay = Stacks(values)
    for op in ops:
        replay.apply(op)
    return replay.is_solved() and sorted(values) == replay.a


def _run(sorter, values):
    stacks = Stacks(values)
    sorter(stacks)
    return stacks


unique_ints = st.lists(
    st.integers(min_value=-(2**31), max_value=2**31 - 1), unique=True, max_size=130
)


def test_sort_two_swaps_when_needed():
    assert _run(sort_two, [2, 1]).ops == ["sa"]
    assert _run(sort_two, [1, 2]).ops == []


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1, 2, 3], []),
        ([2, 1, 3], ["sa"]),
        ([3, 2, 1], ["sa", "rra"]),
        ([3, 1, 2], ["ra"]),
        ([1, 3, 2], ["sa", "ra"]),
        ([2, 3, 1], ["rra"]),
    ],
)
def test_sort_three_cases(values, expected):
    stacks = _run(sort_three, values)
    assert stacks.ops == expected
    assert stacks.a == sorted(values)


def test_sort_three_needs_three():
    with pytest.raises(ValueError):
        sort_three(Stacks([2, 1]))


@given(st.lists(st.integers(), unique=True, min_size=4, max_size=5))
def test_sort_five_solves(values):
    stacks = _run(sort_five, values)
    assert stacks.is_solved()
    assert _replays_to_solution(values, stacks.ops)


@settings(max_examples=60)
@given(unique_ints)
@pytest.mark.parametrize("sorter", [sort_simple, sort_medium, sort_complex, sort_adaptive])
def test_sorters_solve(sorter, values):
    stacks = _run(sorter, values)
    assert stacks.is_solved()
    assert sorted(stacks.a) == sorted(values)
    assert _replays_to_solution(values, stacks.ops)


@pytest.mark.parametrize("sorter", [sort_simple, sort_medium, sort_complex, sort_adaptive])
def test_sorted_input_needs_no_operations(sorter):
    assert _run(sorter, list(range(10))).ops == []


def test_complex_uses_only_radix_operations():
    stacks = _run(sort_complex, [5, -3, 9, 0, 12, 7, 1])
    assert set(stacks.ops) <= {"ra", "pb", "pa"}
    assert stacks.is_solved()


def test_adaptive_low_disorder_matches_simple():
    values = [1, 2, 3, 5, 4, 6, 7, 8, 9]
    assert _run(sort_adaptive, values).ops == _run(sort_simple, values).ops


def test_adaptive_high_disorder_matches_complex():
    values = list(range(20, 0, -1))
    assert _run(sort_adaptive, values).ops == _run(sort_complex, values).ops


@pytest.mark.parametrize(
    "flag, sorter",
    [
        ("--simple", sort_simple),
        ("--medium", sort_medium),
        ("--complex", sort_complex),
        ("--other", sort_adaptive),
    ],
)
def test_sort_with_flag_selects_strategy(flag, sorter):
    values = [8, 3, 11, 0, -4, 6, 2, 9]
    stacks = Stacks(values)
    ops = sort_with_flag(stacks, flag)
    assert ops == _run(sorter, values).ops
    assert stacks.is_solved()