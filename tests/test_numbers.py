"""Tests for number helpers."""

import math

import pytest

from primkit.numbers import (
    average,
    is_even,
    is_odd,
    max_of,
    min_of,
    ordinalize,
    round_half_up,
    total,
)


def test_is_even_and_is_odd():
    assert is_even(2)
    assert is_even(112)
    assert not is_even(11)
    assert is_odd(21)
    assert not is_odd(4)

    # None is treated as 0
    assert is_even(None)
    assert not is_odd(None)


def test_ordinalize():
    """Test English ordinal suffixes, including the teens."""
    assert ordinalize(None) == "0th"
    assert ordinalize(1) == "1st"
    assert ordinalize(2) == "2nd"
    assert ordinalize(3) == "3rd"
    assert ordinalize(4) == "4th"
    assert ordinalize(11) == "11th"
    assert ordinalize(12) == "12th"
    assert ordinalize(13) == "13th"
    assert ordinalize(21) == "21st"
    assert ordinalize(112) == "112th"
    assert ordinalize(-1) == "-1st"


def test_aggregates():
    assert max_of([4, 5, 6]) == 6
    assert min_of([11, 21, 112]) == 11
    assert total([11, 21, 112]) == 144
    assert average([2, 3]) == 2.5
    assert average([11, 21, 112]) == 48


def test_aggregates_of_empty_input_are_zero():
    for fn in (max_of, min_of, total, average):
        assert fn([]) == 0
        assert fn(None) == 0


def test_round_half_up():
    """Test that halves round towards +infinity instead of to even."""
    assert round_half_up(None) == 0
    assert round_half_up(1.2) == 1
    assert round_half_up(1.5) == 2
    assert round_half_up(2.5) == 3
    assert round_half_up(2.8) == 3
    assert round_half_up(-2.5) == -2


def test_round_half_up_rejects_non_finite():
    with pytest.raises(ValueError):
        round_half_up(math.nan)

    with pytest.raises(OverflowError):
        round_half_up(math.inf)
