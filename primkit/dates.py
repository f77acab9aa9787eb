"""Naive date arithmetic.

All helpers work on naive, local `datetime` values and never look at
timezones. Month and year steps are delegated to dateutil's relativedelta,
which clamps the day to the end of shorter months (Jan 31 + 1 month is
Feb 28/29).
"""

import math
from datetime import datetime, timedelta

from dateutil.relativedelta import relativedelta

from primkit.duration import Days, Duration
from primkit.util import MILLISECOND

# Python weekday integers (datetime.weekday())
_MONDAY = 0
_TUESDAY = 1
_WEDNESDAY = 2
_THURSDAY = 3
_FRIDAY = 4
_SATURDAY = 5
_SUNDAY = 6


def now() -> datetime:
    """The current local date and time."""
    return datetime.now()


def today() -> datetime:
    """Today's date at midnight."""
    return now().replace(hour=0, minute=0, second=0, microsecond=0)


def tomorrow() -> datetime:
    """Tomorrow's date at midnight."""
    return add_days(today(), 1)


def yesterday() -> datetime:
    """Yesterday's date at midnight."""
    return subtract_days(today(), 1)


def add_days(date: datetime, days: int) -> datetime:
    return date + timedelta(days=days)


def subtract_days(date: datetime, days: int) -> datetime:
    return add_days(date, -days)


def add_months(date: datetime, months: int) -> datetime:
    """Add calendar months, clamping the day to the target month's length."""
    return date + relativedelta(months=months)


def subtract_months(date: datetime, months: int) -> datetime:
    return add_months(date, -months)


def add_years(date: datetime, years: int) -> datetime:
    """Add years as 12-month steps (Feb 29 lands on Feb 28 in common years)."""
    return add_months(date, years * 12)


def subtract_years(date: datetime, years: int) -> datetime:
    return add_years(date, -years)


def days_between(start: datetime, end: datetime) -> int:
    """Whole days between two dates, ignoring order."""
    elapsed = (end - start) / timedelta(milliseconds=MILLISECOND)
    day = Duration.from_days(Days(1)).to_milliseconds()
    return abs(math.floor(elapsed / day))


def months_between(start: datetime, end: datetime) -> int:
    """Calendar-month distance between two dates, ignoring the day and order."""
    years = end.year - start.year
    months = end.month - start.month
    return abs(years * 12 + months)


def years_between(start: datetime, end: datetime) -> int:
    """Whole years between two dates.

    A year only counts once its anniversary (month and day) is reached.

    Example:
        >>> years_between(datetime(2007, 8, 1), datetime(2008, 7, 31))
        0
        >>> years_between(datetime(2007, 8, 1), datetime(2008, 8, 1))
        1
    """
    years = end.year - start.year
    if years == 0:
        return 0

    anniversary_passed = (end.month, end.day) >= (start.month, start.day)
    if not anniversary_passed:
        if years < 0:
            return abs(years)
        return abs(years - 1)
    return abs(years)


def is_monday(date: datetime) -> bool:
    return date.weekday() == _MONDAY


def is_tuesday(date: datetime) -> bool:
    return date.weekday() == _TUESDAY


def is_wednesday(date: datetime) -> bool:
    return date.weekday() == _WEDNESDAY


def is_thursday(date: datetime) -> bool:
    return date.weekday() == _THURSDAY


def is_friday(date: datetime) -> bool:
    return date.weekday() == _FRIDAY


def is_saturday(date: datetime) -> bool:
    return date.weekday() == _SATURDAY


def is_sunday(date: datetime) -> bool:
    return date.weekday() == _SUNDAY


def is_weekend(date: datetime) -> bool:
    return is_saturday(date) or is_sunday(date)


def is_weekday(date: datetime) -> bool:
    return not is_weekend(date)


def is_in_past(date: datetime) -> bool:
    """True if the date falls before today."""
    return date < today()


def is_in_future(date: datetime) -> bool:
    """True if the date falls on tomorrow or later.

    This compares calendar days: a time later today is not "in the future".
    """
    return date >= tomorrow()


def is_today(date: datetime) -> bool:
    return not is_in_future(date) and not is_in_past(date)
