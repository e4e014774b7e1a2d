"""Field-by-field comparison and hashing of structures.

Every function compares the first ``N`` fields of both arguments, where
``N`` is the smaller of the two field counts. If those fields are all
equal, the field counts decide: the structure with fewer fields orders
first.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .fields import field_values

__all__ = [
    "eq_fields",
    "ne_fields",
    "gt_fields",
    "lt_fields",
    "ge_fields",
    "le_fields",
    "hash_fields",
]

_HASH_MASK = (1 << 64) - 1
_HASH_MAGIC = 0x9E3779B9


def _lexicographic(
    lhs: Any, rhs: Any, on_equal_prefix: Callable[[int, int], bool]
) -> bool:
    """Order ``lhs`` and ``rhs`` by their fields using only ``<`` on fields."""
    left = field_values(lhs)
    right = field_values(rhs)
    for a, b in zip(left, right):
        if a < b:
            return True
        if b < a:
            return False
    return on_equal_prefix(len(left), len(right))


def eq_fields(lhs: Any, rhs: Any) -> bool:
    """Return True if both have the same field count and all fields are equal."""
    left = field_values(lhs)
    right = field_values(rhs)
    if len(left) != len(right):
        return False
    return all(a == b for a, b in zip(left, right))


def ne_fields(lhs: Any, rhs: Any) -> bool:
    """Return True if the field counts differ or any pair of fields differs."""
    left = field_values(lhs)
    right = field_values(rhs)
    if len(left) != len(right):
        return True
    return any(a != b for a, b in zip(left, right))


def lt_fields(lhs: Any, rhs: Any) -> bool:
    """Return True if ``lhs`` orders strictly before ``rhs`` field by field."""
    return _lexicographic(lhs, rhs, lambda n, m: n < m)


def gt_fields(lhs: Any, rhs: Any) -> bool:
    """Return True if ``lhs`` orders strictly after ``rhs`` field by field."""
    return _lexicographic(rhs, lhs, lambda n, m: n < m)


def le_fields(lhs: Any, rhs: Any) -> bool:
    """Return True if ``lhs`` orders before or equal to ``rhs`` field by field."""
    return _lexicographic(lhs, rhs, lambda n, m: n <= m)


def ge_fields(lhs: Any, rhs: Any) -> bool:
    """Return True if ``lhs`` orders after or equal to ``rhs`` field by field."""
    return _lexicographic(rhs, lhs, lambda n, m: n <= m)


def hash_fields(value: Any) -> int:
    """Return a combined hash of all the fields of ``value``."""
    seed = 0
    for field in field_values(value):
        field_hash = hash(field) & _HASH_MASK
        seed ^= (field_hash + _HASH_MAGIC + ((seed << 6) & _HASH_MASK) + (seed >> 2))
        seed &= _HASH_MASK
    return seed