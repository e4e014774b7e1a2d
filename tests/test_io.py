from collections import namedtuple
from dataclasses import dataclass, field

import pytest

from fieldwise.fields import ReflectionError
from fieldwise.io import IoFields, io_fields, read_fields, write_fields


@dataclass
class SomePerson:
    name: str
    birth_year: int


@dataclass
class Pair:
    f1: int
    f2: int


@dataclass
class Other:
    c: str
    nested: Pair


@dataclass
class Mixed:
    flag: bool
    ratio: float
    z: complex
    items: list = field(default_factory=list)


@dataclass(frozen=True)
class Frozen:
    a: int
    b: int


Point = namedtuple("Point", "x y")


@dataclass
class WithPoint:
    p: Point
    n: int


def test_motivating_example_output():
    val = SomePerson("Edgar Allan Poe", 1809)
    assert str(io_fields(val)) == '{"Edgar Allan Poe", 1809}'


def test_incremented_fields_output():
    var = Pair(42, 43)
    var.f1 += 1
    var.f2 += 1
    assert write_fields(var) == "{43, 44}"


def test_io_fields_wraps_value():
    wrapper = io_fields(Pair(1, 2))
    assert isinstance(wrapper, IoFields)
    assert wrapper.value == Pair(1, 2)
    assert str(wrapper) == "{1, 2}"


def test_empty_structure():
    @dataclass
    class Empty:
        pass

    assert write_fields(Empty()) == "{}"
    assert read_fields("  {  }  ", Empty()) == Empty()


def test_round_trip_person():
    original = SomePerson("Edgar Allan Poe", 1809)
    target = SomePerson("", 0)
    read_fields(write_fields(original), target)
    assert target == original


def test_round_trip_string_with_escapes():
    original = SomePerson('say "hi" \\ bye, {ok}', 7)
    target = SomePerson("", 0)
    read_fields(write_fields(original), target)
    assert target == original


def test_round_trip_nested():
    original = Other("A", Pair(3, 4))
    target = Other("", Pair(0, 0))
    read_fields(write_fields(original), target)
    assert target == original


def test_round_trip_mixed_types():
    original = Mixed(True, 42.01, 1 + 2j, [5, 6, 7])
    target = Mixed(False, 0.0, 0j, [0, 0, 0])
    read_fields(write_fields(original), target)
    assert target == original


def test_round_trip_namedtuple_field():
    original = WithPoint(Point(1, 2), 3)
    target = WithPoint(Point(0, 0), 0)
    read_fields(write_fields(original), target)
    assert target == original
    assert isinstance(target.p, Point)


def test_round_trip_list():
    target = [0, 0, 0]
    read_fields(write_fields([9, 8, 7]), target)
    assert target == [9, 8, 7]


def test_read_returns_value_and_accepts_whitespace():
    target = Pair(0, 0)
    assert read_fields(" {  10 ,11 } ", target) is target
    assert target == Pair(10, 11)


def test_read_unquoted_string_field():
    target = SomePerson("", 0)
    read_fields("{Poe, 1809}", target)
    assert target == SomePerson("Poe", 1809)


@pytest.mark.parametrize(
    "text",
    ["1, 2}", "{1, 2", "{1 2}", "{1, 2} extra", "{1, x}", "{1}", "{1, 2, 3}", "{, 2}"],
)
def test_malformed_text_raises(text):
    target = Pair(5, 6)
    with pytest.raises(ValueError):
        read_fields(text, target)
    assert target == Pair(5, 6)


def test_quoted_string_for_number_field_raises():
    with pytest.raises(ValueError):
        read_fields('{"1", 2}', Pair(0, 0))


def test_invalid_boolean_raises():
    with pytest.raises(ValueError):
        read_fields("{maybe, 1.0, 0j, {}}", Mixed(False, 0.0, 0j, []))


def test_unterminated_string_raises():
    with pytest.raises(ValueError):
        read_fields('{"abc, 1}', SomePerson("", 0))


def test_read_into_frozen_raises():
    target = Frozen(1, 2)
    with pytest.raises(ReflectionError):
        read_fields("{3, 4}", target)
    assert target == Frozen(1, 2)


def test_read_into_class_raises():
    with pytest.raises(ReflectionError):
        read_fields("{1, 2}", Pair)


def test_write_unreflectable_raises():
    with pytest.raises(ReflectionError):
        write_fields(object())