"""Discovery of the fields of structure-like values.

A *structure* here is one of:

* a dataclass (class or instance): its fields in declaration order;
* a named tuple (class or instance): its ``_fields`` in order;
* a plain sequence instance (``list``, ``tuple``, ``array.array``): its
  elements, like the elements of a fixed-size array;
* a number (``int``, ``float``, ``complex``, ``bool``): a single field
  holding the value itself.

Anything else cannot be reflected and raises :class:`ReflectionError`.
"""

from __future__ import annotations

import array
import dataclasses
import numbers
import types
import typing
from typing import Any

__all__ = ["ReflectionError", "fields_count", "is_reflectable", "field_values"]


class ReflectionError(TypeError):
    """Raised when a value or type cannot be reflected field by field."""


_SEQUENCE_TYPES = (list, tuple, array.array)


def _is_union(value: Any) -> bool:
    if typing.get_origin(value) is typing.Union:
        return True
    union_type = getattr(types, "UnionType", None)
    return union_type is not None and isinstance(value, union_type)


def _is_namedtuple_class(cls: type) -> bool:
    return issubclass(cls, tuple) and isinstance(getattr(cls, "_fields", None), tuple)


def _check_dataclass(cls: type) -> None:
    for base in cls.__mro__[1:]:
        if dataclasses.is_dataclass(base) and dataclasses.fields(base):
            raise ReflectionError("Inherited types are not supported.")
    params = getattr(cls, "__dataclass_params__", None)
    if params is not None and not params.init:
        raise ReflectionError(
            "Types with user specified constructors "
            "(non-aggregate initializable types) are not supported."
        )


def _field_names_of_class(cls: type) -> tuple[str, ...] | None:
    """Names of the fields of a structure class, or None if the class has none."""
    if dataclasses.is_dataclass(cls):
        _check_dataclass(cls)
        return tuple(f.name for f in dataclasses.fields(cls))
    if _is_namedtuple_class(cls):
        return tuple(cls._fields)
    return None


def _classify(value: Any) -> tuple[str, Any]:
    """Return the kind of structure and the data needed to read it."""
    if _is_union(value):
        raise ReflectionError("For safety reasons it is forbidden to reflect unions.")

    is_class = isinstance(value, type)
    cls = value if is_class else type(value)

    names = _field_names_of_class(cls)
    if names is not None:
        return ("named", names)

    if is_class:
        if issubclass(cls, _SEQUENCE_TYPES):
            raise ReflectionError(
                "The number of elements of a sequence type is only known for instances."
            )
        if issubclass(cls, numbers.Number):
            return ("scalar", None)
        raise ReflectionError(f"Type {cls.__qualname__} must be aggregate initializable.")

    if isinstance(value, _SEQUENCE_TYPES):
        return ("sequence", len(value))
    if isinstance(value, numbers.Number):
        return ("scalar", None)
    raise ReflectionError(f"Type {cls.__qualname__} must be aggregate initializable.")


def fields_count(value: Any) -> int:
    """Return the number of fields of a structure class or instance."""
    kind, data = _classify(value)
    if kind == "named":
        return len(data)
    if kind == "sequence":
        return data
    return 1


def is_reflectable(value: Any) -> bool:
    """Tell whether ``value`` (a class or an instance) can be reflected."""
    try:
        _classify(value)
    except ReflectionError:
        return False
    return True


def field_values(value: Any) -> tuple[Any, ...]:
    """Return the values of the fields of a structure instance, in order."""
    if isinstance(value, type):
        raise ReflectionError("Field values can only be read from an instance.")
    kind, data = _classify(value)
    if kind == "named":
        return tuple(getattr(value, name) for name in data)
    if kind == "sequence":
        return tuple(value)
    return (value,)