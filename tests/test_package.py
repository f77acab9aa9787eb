"""Tests for the top-level primkit namespace."""

import primkit
from primkit import average, is_weekend, kebab, ordinalize, seconds, years_between


def test_every_public_name_is_importable_from_package():
    for name in primkit.__all__:
        assert hasattr(primkit, name), name


def test_helper_modules_are_reexported():
    """Test strings, numbers and dates helpers are reachable from primkit."""
    assert kebab is primkit.strings.kebab
    assert ordinalize is primkit.numbers.ordinalize
    assert average is primkit.numbers.average
    assert is_weekend is primkit.dates.is_weekend
    assert years_between is primkit.dates.years_between
    assert seconds(2) == 2000
