"""
Tests for the shared strict/loose comparator.

Every membership and filtering operation relies on values_equal(), so the
cross-type cases (int vs str, int vs float, bool vs int) are pinned here.
"""

import pytest

from enumfriendly.comparison import contains, values_equal


class TestStrict:
    """Strict mode: same type and same value."""

    def test_same_type_same_value(self):
        assert values_equal("pending", "pending", strict=True)
        assert values_equal(1, 1, strict=True)

    def test_int_vs_numeric_string(self):
        assert not values_equal(1, "1", strict=True)

    def test_int_vs_float(self):
        assert not values_equal(1, 1.0, strict=True)

    def test_bool_vs_int(self):
        """bool is an int subclass but still a different type."""
        assert not values_equal(True, 1, strict=True)

    def test_none(self):
        assert values_equal(None, None, strict=True)
        assert not values_equal(None, 0, strict=True)


class TestLoose:
    """Loose mode: numbers and numeric strings compare numerically."""

    @pytest.mark.parametrize(
        "left, right",
        [
            (1, "1"),
            ("1", 1),
            ("1", "01"),
            ("1.0", 1),
            (" 2 ", 2),
            ("+3", 3),
            ("1e2", 100),
            (1, 1.0),
            (True, 1),
            ("pending", "pending"),
        ],
    )
    def test_matches(self, left, right):
        assert values_equal(left, right, strict=False)

    @pytest.mark.parametrize(
        "left, right",
        [
            ("abc", 0),
            ("", 0),
            ("1abc", 1),
            ("2.5", 2),
            (None, 0),
            ("pending", "PENDING"),
        ],
    )
    def test_non_matches(self, left, right):
        assert not values_equal(left, right, strict=False)

    def test_very_long_digit_strings(self):
        """Digit strings past the int conversion limit still compare."""
        huge = "9" * 5000
        assert not values_equal(huge, 1, strict=False)
        assert values_equal(huge, huge, strict=False)
        assert values_equal(huge, " " + huge, strict=False)
        assert not values_equal(huge, "9" * 4999 + "8", strict=False)

    def test_is_symmetric(self):
        pairs = [(1, "1"), ("abc", 0), (1.5, "1.5"), (2, "2.0")]
        for left, right in pairs:
            assert values_equal(left, right, strict=False) == values_equal(right, left, strict=False)


class TestContains:
    """Test the haystack helper."""

    def test_strict_contains(self):
        assert contains([1, 2, 3], 2)
        assert not contains([1, 2, 3], "2")

    def test_loose_contains(self):
        assert contains([1, 2, 3], "2", strict=False)

    def test_empty_haystack(self):
        assert not contains([], 1, strict=False)
