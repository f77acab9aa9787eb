"""Number helpers.

These accept None where a number is expected and treat it as 0; the list
helpers return 0 for an empty (or None) list instead of raising.
"""

import math
from collections.abc import Sequence

from primkit.core import is_empty


def is_even(num: int | None) -> bool:
    """True for even numbers. None counts as 0, so it is even."""
    return (num or 0) % 2 == 0


def is_odd(num: int | None) -> bool:
    return not is_even(num)


def ordinalize(num: int | None) -> str:
    """Convert a number to its English ordinal.

    Example:
        >>> [ordinalize(n) for n in (1, 2, 3, 4, 11, 21, 112)]
        ['1st', '2nd', '3rd', '4th', '11th', '21st', '112th']
        >>> ordinalize(None)
        '0th'
    """
    num = num or 0
    magnitude = abs(num)

    if 11 <= magnitude % 100 <= 13:
        return f"{num}th"

    match magnitude % 10:
        case 1:
            return f"{num}st"
        case 2:
            return f"{num}nd"
        case 3:
            return f"{num}rd"
        case _:
            return f"{num}th"


def max_of(nums: Sequence[float] | None) -> float:
    if is_empty(nums):
        return 0
    return max(nums)


def min_of(nums: Sequence[float] | None) -> float:
    if is_empty(nums):
        return 0
    return min(nums)


def total(nums: Sequence[float] | None) -> float:
    if is_empty(nums):
        return 0
    return sum(nums)


def average(nums: Sequence[float] | None) -> float:
    """Arithmetic mean, unrounded.

    Example:
        >>> average([2, 3])
        2.5
        >>> average([])
        0
    """
    if is_empty(nums):
        return 0
    return total(nums) / len(nums)


def round_half_up(num: float | None) -> int:
    """Round to the nearest integer, with halves going towards +infinity.

    Unlike the built-in `round`, this does not round halves to even:
    `round_half_up(2.5) == 3` and `round_half_up(-2.5) == -2`.

    Raises:
        ValueError: If num is NaN
        OverflowError: If num is infinite
    """
    return math.floor((num or 0) + 0.5)
