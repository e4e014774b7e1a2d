import dataclasses
import math
from typing import NamedTuple

import pytest

from fieldwise.fields import ReflectionError
from fieldwise.ops import (
    eq_fields,
    ge_fields,
    gt_fields,
    hash_fields,
    le_fields,
    lt_fields,
    ne_fields,
)


@dataclasses.dataclass(eq=False)
class ComparableStruct:
    i: int
    s: int


@dataclasses.dataclass(eq=False)
class Text:
    f1: str
    f2: str


class Pair(NamedTuple):
    a: int
    b: int


class Triple(NamedTuple):
    a: int
    b: int
    c: int


@dataclasses.dataclass
class WithList:
    items: list


def test_lt_from_documentation_example():
    s1 = ComparableStruct(0, 1)
    s2 = ComparableStruct(0, 2)
    assert lt_fields(s1, s2)
    assert not lt_fields(s2, s1)
    assert gt_fields(s2, s1)


def test_eq_of_strings():
    assert eq_fields(Text("aaa", "zomg"), Text("aaa", "zomg"))
    assert not ne_fields(Text("aaa", "zomg"), Text("aaa", "zomg"))
    assert ne_fields(Text("aaa", "zomg"), Text("aab", "zomg"))


def test_eq_across_different_types():
    assert eq_fields(ComparableStruct(3, 4), Pair(3, 4))
    assert not eq_fields(ComparableStruct(3, 4), Pair(3, 5))


def test_different_field_counts():
    short, long = Pair(1, 2), Triple(1, 2, 3)
    assert not eq_fields(short, long)
    assert ne_fields(short, long)
    assert lt_fields(short, long)
    assert le_fields(short, long)
    assert gt_fields(long, short)
    assert ge_fields(long, short)
    assert not gt_fields(short, long)


def test_prefix_decides_before_length():
    assert gt_fields(Pair(2, 0), Triple(1, 9, 9))
    assert lt_fields(Triple(1, 9, 9), Pair(2, 0))


@pytest.mark.parametrize(
    "lhs,rhs",
    [(Pair(1, 2), Pair(1, 2)), (Pair(1, 2), Pair(1, 3)), (Pair(5, 0), Pair(1, 9))],
)
def test_orderings_are_consistent(lhs, rhs):
    assert lt_fields(lhs, rhs) == gt_fields(rhs, lhs)
    assert le_fields(lhs, rhs) == (not gt_fields(lhs, rhs))
    assert ge_fields(lhs, rhs) == (not lt_fields(lhs, rhs))
    assert eq_fields(lhs, rhs) == (not ne_fields(lhs, rhs))
    assert eq_fields(lhs, rhs) == (le_fields(lhs, rhs) and ge_fields(lhs, rhs))


def test_equal_structures_compare_non_strictly():
    a, b = ComparableStruct(7, 7), ComparableStruct(7, 7)
    assert le_fields(a, b) and ge_fields(a, b)
    assert not lt_fields(a, b) and not gt_fields(a, b)


def test_nan_fields_are_not_equal():
    nan = math.nan
    assert not eq_fields(Pair(nan, 1), Pair(nan, 1))
    assert ne_fields(Pair(nan, 1), Pair(nan, 1))


def test_hash_equal_for_equal_fields():
    assert hash_fields(ComparableStruct(1, 2)) == hash_fields(ComparableStruct(1, 2))
    assert hash_fields(ComparableStruct(1, 2)) == hash_fields(Pair(1, 2))


def test_hash_depends_on_order():
    assert hash_fields(Pair(1, 2)) != hash_fields(Pair(2, 1))


def test_hash_is_unsigned_64_bit():
    value = hash_fields(Pair(-1, -5))
    assert 0 <= value < 2**64


def test_hash_of_unhashable_field_raises():
    with pytest.raises(TypeError):
        hash_fields(WithList([1, 2]))


def test_non_reflectable_raises():
    with pytest.raises(ReflectionError):
        eq_fields(object(), object())
    with pytest.raises(ReflectionError):
        hash_fields("text")