"""General predicates and list helpers.

Equality helpers compare values by their string form (see `stringify`), so
`is_equal("1", 1)` holds. The set-style helpers (`union`, `intersection`,
`difference`) work on lists and keep first-seen order.
"""

import copy
import json
import math
import random
from collections.abc import Hashable, Iterable, Sequence, Sized
from typing import Any, TypeVar, overload

from primkit.strings import lower

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)


def clone(obj: T) -> T:
    """Return a deep copy of `obj`."""
    return copy.deepcopy(obj)


def stringify(thing: Any) -> str:
    """Convert a value to its string form.

    None, booleans, dicts, lists and tuples are rendered as compact JSON;
    everything else goes through `str()`. Values inside containers that JSON
    cannot encode (datetimes, Decimals, ...) are rendered with `str()` too.

    Example:
        >>> stringify({"foo": "bar"})
        '{"foo":"bar"}'
        >>> stringify([1, 2, 3])
        '[1,2,3]'
        >>> stringify(False)
        'false'
        >>> stringify(1)
        '1'
    """
    if thing is None or isinstance(thing, (bool, dict, list, tuple)):
        return json.dumps(thing, separators=(",", ":"), default=str)
    return str(thing)


def is_equal(thing1: Any, thing2: Any) -> bool:
    """True if both values have the same `stringify` form."""
    return stringify(thing1) == stringify(thing2)


def is_not_equal(thing1: Any, thing2: Any) -> bool:
    return not is_equal(thing1, thing2)


def is_equal_ignore_case(thing1: Any, thing2: Any) -> bool:
    """Like `is_equal`, but lowercases both string forms first."""
    return lower(stringify(thing1)) == lower(stringify(thing2))


def is_not_equal_ignore_case(thing1: Any, thing2: Any) -> bool:
    return not is_equal_ignore_case(thing1, thing2)


def parse(text: str) -> Any:
    """Parse JSON, falling back to the text itself when it isn't JSON.

    Example:
        >>> parse("0")
        0
        >>> parse("Hello world!")
        'Hello world!'
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


@overload
def first(value: str) -> str | None: ...


@overload
def first(value: Sequence[T]) -> T | None: ...


def first(value: str | Sequence[T]) -> str | T | None:
    """First item of a sequence (or character of a string), None if empty."""
    return value[0] if value else None


@overload
def last(value: str) -> str | None: ...


@overload
def last(value: Sequence[T]) -> T | None: ...


def last(value: str | Sequence[T]) -> str | T | None:
    """Last item of a sequence (or character of a string), None if empty."""
    return value[-1] if value else None


@overload
def reverse(thing: str) -> str: ...


@overload
def reverse(thing: list[T]) -> list[T]: ...


@overload
def reverse(thing: tuple[T, ...]) -> tuple[T, ...]: ...


def reverse(thing: str | list[T] | tuple[T, ...]) -> str | list[T] | tuple[T, ...]:
    """Return a reversed copy of a string, list or tuple."""
    if not isinstance(thing, (str, list, tuple)):
        raise TypeError(
            f"reverse() expects a str, list or tuple.\n"
            f"Got {type(thing).__name__!r}: {thing!r}\n"
            f"Hint: Convert other iterables first: reverse(list(items))"
        )
    return thing[::-1]


def is_empty(thing: Any) -> bool:
    """Determine if a value is empty.

    Values are empty when they are None, the empty string, or a sized
    container with no items. Anything else (including 0 and False) is not
    empty.
    """
    if thing is None:
        return True
    if isinstance(thing, Sized):
        return len(thing) == 0
    return False


def is_not_empty(thing: Any) -> bool:
    return not is_empty(thing)


def unique(items: Iterable[H]) -> list[H]:
    """Distinct items, in the order they first appear."""
    return list(dict.fromkeys(items))


def distinct(items: Iterable[H]) -> list[H]:
    """Alias for `unique`."""
    return unique(items)


def rand(start: int, end: int) -> int:
    """Random integer in `[start, end)`.

    Returns `start` when `start == end`. Bounds are expected in order; with
    `end < start` the result falls in `[end, start]`.
    """
    return math.floor(random.random() * (end - start)) + start


def sample(items: Sequence[T]) -> T | None:
    """Pick a random item, or None from an empty sequence."""
    if not items:
        return None
    return items[rand(0, len(items))]


def truthy(thing: Any) -> bool:
    return bool(thing)


def falsy(thing: Any) -> bool:
    return not truthy(thing)


def is_none(thing: Any) -> bool:
    return thing is None


def is_some(thing: Any) -> bool:
    return not is_none(thing)


def noop(*args: Any, **kwargs: Any) -> None:
    pass


def todo(message: str | None = None) -> None:
    """Placeholder for unfinished code paths; does nothing."""
    noop(message)


def in_range(value: float, min_value: float, max_value: float) -> bool:
    """True if `min_value <= value <= max_value`."""
    return min_value <= value <= max_value


def chunk(items: Sequence[T], size: int) -> list[list[T]]:
    """Split a sequence into lists of `size` items (the last may be shorter).

    Example:
        >>> chunk([1, 2, 3, 4, 5, 6, 7], 3)
        [[1, 2, 3], [4, 5, 6], [7]]

    Raises:
        ValueError: If size is not positive
    """
    if size <= 0:
        raise ValueError(
            f"chunk size must be > 0.\n"
            f"Got: {size!r}\n"
            f"Hint: Pass the number of items per chunk, e.g.\n"
            f"  chunk([1, 2, 3, 4], 2)  # [[1, 2], [3, 4]]"
        )
    return [list(items[i : i + size]) for i in range(0, len(items), size)]


def union(*lists: Iterable[H]) -> list[H]:
    """Distinct items from all lists, in first-seen order."""
    return unique(item for items in lists for item in items)


def intersection(*lists: Iterable[H]) -> list[H]:
    """Items of the first list that appear in every other list."""
    if not lists:
        return []
    result = list(lists[0])
    for items in lists[1:]:
        present = set(items)
        result = [item for item in result if item in present]
    return result


def difference(*lists: Iterable[H]) -> list[H]:
    """Distinct items of the first list that appear in none of the others."""
    if not lists:
        return []
    excluded: set[H] = set()
    for items in lists[1:]:
        excluded.update(items)
    return [item for item in unique(lists[0]) if item not in excluded]
