"""Tests for the three-way comparison helper."""

from datetime import datetime, timezone
from decimal import Decimal
from fractions import Fraction

import pytest

from rampart import Comparison, compare


def test_compare_ints():
    assert compare(1, 2) is Comparison.LT
    assert compare(2, 2) is Comparison.EQ
    assert compare(3, 2) is Comparison.GT


def test_compare_mixed_numeric_types():
    """Numbers of different types compare by value."""
    assert compare(Decimal("1.5"), 2) is Comparison.LT
    assert compare(Fraction(1, 2), 0.5) is Comparison.EQ


def test_compare_tuples():
    assert compare((1, "b"), (1, "a")) is Comparison.GT


def test_unorderable_values():
    """Comparison errors are re-raised with a hint and the original cause."""
    with pytest.raises(TypeError, match="mutually orderable") as info:
        compare(1, "a")
    assert isinstance(info.value.__cause__, TypeError)
    assert "cmp_to_key" in str(info.value)


def test_naive_and_aware_datetimes():
    with pytest.raises(TypeError, match="tzinfo=timezone.utc"):
        compare(datetime(2025, 1, 1), datetime(2025, 1, 1, tzinfo=timezone.utc))
