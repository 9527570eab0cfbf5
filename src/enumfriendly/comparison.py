"""
Strict and loose value comparison.

This is the ONLY place where two values are compared for membership.
has_value, only_values and except_values all route through values_equal(),
so they always agree on what "matches" means.

Strict mode:
    Same exact type AND equal value.
    1 != "1", 1 != 1.0, True != 1

Loose mode:
    Numbers and numeric strings are canonicalized to numbers and compared
    numerically:  1 == "1" == "1.0" == " 1 " == 1.0
    A number never matches a non-numeric string.
    Everything else falls back to plain ==.
"""

import re
from decimal import Decimal
from typing import Any, Iterable, Optional, Union


_NUMERIC_RE = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")
_INTEGER_RE = re.compile(r"^\s*[+-]?\d+\s*$")


def _as_number(value: Any) -> Optional[Union[int, float, Decimal]]:
    """Canonical numeric form of a value, or None if it is not numeric."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str) and _NUMERIC_RE.match(value):
        if _INTEGER_RE.match(value):
            try:
                return int(value)
            except ValueError:
                # Past the interpreter's int string conversion limit
                return Decimal(value.strip())
        return float(value)
    return None


def values_equal(left: Any, right: Any, strict: bool = True) -> bool:
    """
    Compare two values under strict or loose equality.

    Args:
        left: First value
        right: Second value
        strict: True for type-and-value equality, False for loose equality

    Returns:
        True if the values match under the selected mode
    """
    if strict:
        return type(left) is type(right) and left == right

    left_num = _as_number(left)
    right_num = _as_number(right)
    if left_num is not None and right_num is not None:
        return left_num == right_num
    if left_num is not None or right_num is not None:
        # A number against a string that does not parse as one
        if isinstance(left, str) or isinstance(right, str):
            return False
    return left == right


def contains(haystack: Iterable[Any], needle: Any, strict: bool = True) -> bool:
    """True if any element of haystack matches needle under values_equal()."""
    return any(values_equal(item, needle, strict) for item in haystack)
