from .core import (
    chunk,
    clone,
    difference,
    distinct,
    falsy,
    first,
    in_range,
    intersection,
    is_empty,
    is_equal,
    is_equal_ignore_case,
    is_none,
    is_not_empty,
    is_not_equal,
    is_not_equal_ignore_case,
    is_some,
    last,
    noop,
    parse,
    rand,
    reverse,
    sample,
    stringify,
    todo,
    truthy,
    union,
    unique,
)
from .duration import (
    Days,
    Duration,
    Hours,
    Milliseconds,
    Minutes,
    Seconds,
    Weeks,
    Years,
    days,
    hours,
    milliseconds,
    minutes,
    seconds,
    sleep,
    weeks,
    years,
)
from .dates import (
    add_days,
    add_months,
    add_years,
    days_between,
    is_friday,
    is_in_future,
    is_in_past,
    is_monday,
    is_saturday,
    is_sunday,
    is_thursday,
    is_today,
    is_tuesday,
    is_wednesday,
    is_weekday,
    is_weekend,
    months_between,
    now,
    subtract_days,
    subtract_months,
    subtract_years,
    today,
    tomorrow,
    years_between,
    yesterday,
)
from .numbers import (
    average,
    is_even,
    is_odd,
    max_of,
    min_of,
    ordinalize,
    round_half_up,
    total,
)
from .strings import (
    is_not_whitespace,
    is_whitespace,
    keep_alphabetical,
    keep_alphanumeric,
    keep_numeric,
    kebab,
    lower,
    snake,
    title,
    trim,
    upper,
)

__all__ = [
    "Duration",
    "Milliseconds",
    "Seconds",
    "Minutes",
    "Hours",
    "Days",
    "Weeks",
    "Years",
    "sleep",
    "milliseconds",
    "seconds",
    "minutes",
    "hours",
    "days",
    "weeks",
    "years",
    "clone",
    "stringify",
    "parse",
    "is_equal",
    "is_not_equal",
    "is_equal_ignore_case",
    "is_not_equal_ignore_case",
    "first",
    "last",
    "reverse",
    "is_empty",
    "is_not_empty",
    "unique",
    "distinct",
    "rand",
    "sample",
    "truthy",
    "falsy",
    "is_some",
    "is_none",
    "noop",
    "todo",
    "in_range",
    "chunk",
    "union",
    "intersection",
    "difference",
    "trim",
    "lower",
    "upper",
    "is_whitespace",
    "is_not_whitespace",
    "title",
    "kebab",
    "snake",
    "keep_alphabetical",
    "keep_alphanumeric",
    "keep_numeric",
    "is_even",
    "is_odd",
    "ordinalize",
    "max_of",
    "min_of",
    "total",
    "average",
    "round_half_up",
    "now",
    "today",
    "tomorrow",
    "yesterday",
    "add_days",
    "subtract_days",
    "add_months",
    "subtract_months",
    "add_years",
    "subtract_years",
    "days_between",
    "months_between",
    "years_between",
    "is_monday",
    "is_tuesday",
    "is_wednesday",
    "is_thursday",
    "is_friday",
    "is_saturday",
    "is_sunday",
    "is_weekend",
    "is_weekday",
    "is_in_past",
    "is_in_future",
    "is_today",
]
