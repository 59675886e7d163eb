import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.parsing import (
    InputError,
    format_operations,
    parse_arguments,
    parse_long,
    split_words,
    validate_arguments,
)


def test_parse_long_skips_space_and_reads_sign():
    assert parse_long("  \t-42") == -42
    assert parse_long("+7") == 7


def test_parse_long_stops_at_non_digit():
    assert parse_long("12abc") == 12


def test_parse_long_without_digits_is_zero():
    assert parse_long("abc") == 0
    assert parse_long("-") == 0


@given(st.integers(min_value=-(10**12), max_value=10**12))
def test_parse_long_round_trip(number):
    assert parse_long(str(number)) == number


def test_split_words_drops_empty_pieces():
    assert split_words("  1 2   3 ", " ") == ["1", "2", "3"]


def test_split_words_default_separator_is_space():
    assert split_words("4 5") == ["4", "5"]


def test_split_words_empty_text():
    assert split_words("", " ") == []


def test_validate_rejects_overflow():
    with pytest.raises(InputError) as info:
        validate_arguments(["1", "2147483648"])
    assert info.value.reason == "overflow"


def test_validate_rejects_underflow():
    with pytest.raises(InputError) as info:
        validate_arguments(["-2147483649"])
    assert str(info.value) == "overflow"


def test_validate_rejects_duplicate():
    with pytest.raises(InputError) as info:
        validate_arguments(["3", "1", "3"])
    assert info.value.reason == "duplicate"


def test_parse_arguments_accepts_int_limits():
    assert parse_arguments(["-2147483648", "2147483647"]) == [-2147483648, 2147483647]


@given(st.lists(st.integers(min_value=-(2**31), max_value=2**31 - 1), unique=True))
def test_parse_arguments_round_trip(values):
    assert parse_arguments([str(v) for v in values]) == values


def test_format_operations_one_per_line():
    assert format_operations(["sa", "pb", "rra"]) == "sa\npb\nrra\n"


def test_format_operations_empty():
    assert format_operations([]) == ""