"""Callable comparators and hashers that work field by field."""

from __future__ import annotations

from typing import Any

from .ops import (
    eq_fields,
    ge_fields,
    gt_fields,
    hash_fields,
    le_fields,
    lt_fields,
    ne_fields,
)

__all__ = [
    "EqualTo",
    "NotEqual",
    "Greater",
    "Less",
    "GreaterEqual",
    "LessEqual",
    "Hash",
]


class EqualTo:
    """Comparator returning ``eq_fields(x, y)``."""

    def __call__(self, x: Any, y: Any) -> bool:
        return eq_fields(x, y)


class NotEqual:
    """Comparator returning ``ne_fields(x, y)``."""

    def __call__(self, x: Any, y: Any) -> bool:
        return ne_fields(x, y)


class Greater:
    """Comparator returning ``gt_fields(x, y)``."""

    def __call__(self, x: Any, y: Any) -> bool:
        return gt_fields(x, y)


class Less:
    """Comparator returning ``lt_fields(x, y)``."""

    def __call__(self, x: Any, y: Any) -> bool:
        return lt_fields(x, y)


class GreaterEqual:
    """Comparator returning ``ge_fields(x, y)``."""

    def __call__(self, x: Any, y: Any) -> bool:
        return ge_fields(x, y)


class LessEqual:
    """Comparator returning ``le_fields(x, y)``."""

    def __call__(self, x: Any, y: Any) -> bool:
        return le_fields(x, y)


class Hash:
    """Hasher returning ``hash_fields(x)``."""

    def __call__(self, x: Any) -> int:
        return hash_fields(x)