"""Utility constants and helpers for primkit.

Time unit constants represent durations in milliseconds.
These are the conversion factors used by Duration and the date helpers.
"""

# Time unit constants (all values in milliseconds)
MILLISECOND = 1
SECOND = 1000
MINUTE = 60_000
HOUR = 3_600_000
DAY = 86_400_000
WEEK = 604_800_000
# 365-day year, no leap-year adjustment
YEAR = 31_536_000_000
