"""Unit-safe durations of time.

A Duration stores its length in milliseconds and converts to and from every
supported unit. The unit types (Seconds, Minutes, ...) are NewTypes over
float: they only exist for the type checker, so `Seconds(5)` is just `5` at
runtime.

Example:
    >>> from primkit.duration import Duration, Milliseconds, Seconds, sleep
    >>>
    >>> Duration.from_seconds(Seconds(90)).to_minutes()
    1.5
    >>> await Duration.from_seconds(Seconds(1)).sleep()
    >>> await sleep(Milliseconds(250))
"""

import asyncio
import logging
import math
from dataclasses import dataclass
from datetime import timedelta
from typing import NewType

from typing_extensions import override

from primkit.util import DAY, HOUR, MINUTE, SECOND, WEEK, YEAR

logger = logging.getLogger(__name__)

Milliseconds = NewType("Milliseconds", float)
Seconds = NewType("Seconds", float)
Minutes = NewType("Minutes", float)
Hours = NewType("Hours", float)
Days = NewType("Days", float)
Weeks = NewType("Weeks", float)
Years = NewType("Years", float)


@dataclass(frozen=True, kw_only=True)
class Duration:
    """An immutable length of time, held in milliseconds.

    Build one with the `from_*` constructors and read it back with the
    `to_*` accessors. No conversion rounds, and no constructor validates
    its input: negative, NaN and infinite values propagate arithmetically.
    """

    milliseconds: Milliseconds

    @classmethod
    def from_milliseconds(cls, milliseconds: Milliseconds) -> "Duration":
        return cls(milliseconds=milliseconds)

    @classmethod
    def from_seconds(cls, seconds: Seconds) -> "Duration":
        return cls(milliseconds=Milliseconds(seconds * SECOND))

    @classmethod
    def from_minutes(cls, minutes: Minutes) -> "Duration":
        return cls(milliseconds=Milliseconds(minutes * MINUTE))

    @classmethod
    def from_hours(cls, hours: Hours) -> "Duration":
        return cls(milliseconds=Milliseconds(hours * HOUR))

    @classmethod
    def from_days(cls, days: Days) -> "Duration":
        return cls(milliseconds=Milliseconds(days * DAY))

    @classmethod
    def from_weeks(cls, weeks: Weeks) -> "Duration":
        return cls(milliseconds=Milliseconds(weeks * WEEK))

    @classmethod
    def from_years(cls, years: Years) -> "Duration":
        """Create a Duration from 365-day years."""
        return cls(milliseconds=Milliseconds(years * YEAR))

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> "Duration":
        """Create a Duration from a `datetime.timedelta`."""
        return cls(milliseconds=Milliseconds(delta / timedelta(milliseconds=1)))

    def to_milliseconds(self) -> Milliseconds:
        return self.milliseconds

    def to_seconds(self) -> Seconds:
        return Seconds(self.milliseconds / SECOND)

    def to_minutes(self) -> Minutes:
        return Minutes(self.milliseconds / MINUTE)

    def to_hours(self) -> Hours:
        return Hours(self.milliseconds / HOUR)

    def to_days(self) -> Days:
        return Days(self.milliseconds / DAY)

    def to_weeks(self) -> Weeks:
        return Weeks(self.milliseconds / WEEK)

    def to_years(self) -> Years:
        """Convert to 365-day years."""
        return Years(self.milliseconds / YEAR)

    def to_timedelta(self) -> timedelta:
        """Convert to a `datetime.timedelta` (microsecond resolution).

        Raises:
            ValueError: If the duration is NaN, infinite, or outside the
                range `timedelta` can hold (about 2.7 million years)
        """
        limit = timedelta.max / timedelta(milliseconds=1)
        if not math.isfinite(self.milliseconds) or abs(self.milliseconds) >= limit:
            raise ValueError(
                f"Cannot convert duration to a timedelta.\n"
                f"Got: {self.milliseconds!r} milliseconds\n"
                f"Hint: timedelta holds finite values below {limit!r} milliseconds;\n"
                f"  use to_milliseconds() or to_years() for larger durations"
            )
        return timedelta(milliseconds=self.milliseconds)

    async def sleep(self) -> None:
        """Suspend the current task for this duration.

        Resumes after at least `to_milliseconds()` of wall-clock time. Zero
        and negative durations resume on the next event loop iteration.

        Raises:
            ValueError: If the duration is NaN or infinite
        """
        if not math.isfinite(self.milliseconds):
            raise ValueError(
                f"Cannot sleep for a non-finite duration.\n"
                f"Got: {self.milliseconds!r} milliseconds\n"
                f"Hint: Check the value passed to the Duration constructor, e.g.\n"
                f"  await Duration.from_seconds(Seconds(5)).sleep()"
            )
        logger.debug("Sleeping for %sms", self.milliseconds)
        await asyncio.sleep(self.milliseconds / SECOND)

    @override
    def __str__(self) -> str:
        """Human-friendly string showing the length in milliseconds."""
        return f"Duration({self.milliseconds}ms)"


async def sleep(ms: Milliseconds) -> None:
    """Sleep for the given number of milliseconds.

    Equivalent to `await Duration.from_milliseconds(ms).sleep()`.
    """
    await Duration.from_milliseconds(ms).sleep()


def milliseconds(value: float) -> Milliseconds:
    return Duration.from_milliseconds(Milliseconds(value)).to_milliseconds()


def seconds(value: float) -> Milliseconds:
    """Return the number of milliseconds in `value` seconds."""
    return Duration.from_seconds(Seconds(value)).to_milliseconds()


def minutes(value: float) -> Milliseconds:
    """Return the number of milliseconds in `value` minutes."""
    return Duration.from_minutes(Minutes(value)).to_milliseconds()


def hours(value: float) -> Milliseconds:
    """Return the number of milliseconds in `value` hours."""
    return Duration.from_hours(Hours(value)).to_milliseconds()


def days(value: float) -> Milliseconds:
    """Return the number of milliseconds in `value` days."""
    return Duration.from_days(Days(value)).to_milliseconds()


def weeks(value: float) -> Milliseconds:
    """Return the number of milliseconds in `value` weeks."""
    return Duration.from_weeks(Weeks(value)).to_milliseconds()


def years(value: float) -> Milliseconds:
    """Return the number of milliseconds in `value` 365-day years."""
    return Duration.from_years(Years(value)).to_milliseconds()
