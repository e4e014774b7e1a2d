"""Names of the fields of structures."""

from __future__ import annotations

import array
import dataclasses
import types
from collections.abc import Callable
from typing import Any

from .fields import ReflectionError, field_values, fields_count

__all__ = ["get_name", "names_as_tuple", "for_each_field_with_name"]

_SEQUENCE_TYPES = (list, tuple, array.array)
_CO_VARARGS = 0x04


def _owner_class(value: Any) -> type:
    return value if isinstance(value, type) else type(value)


def _is_namedtuple_class(cls: type) -> bool:
    return issubclass(cls, tuple) and isinstance(getattr(cls, "_fields", None), tuple)


def names_as_tuple(cls: Any) -> tuple[str, ...]:
    """Return the names of all the fields of a structure class or instance."""
    # Validates the structure: rejects unions, inheritance and the like.
    fields_count(cls)
    owner = _owner_class(cls)
    if dataclasses.is_dataclass(owner):
        return tuple(f.name for f in dataclasses.fields(owner))
    if _is_namedtuple_class(owner):
        return tuple(owner._fields)
    if issubclass(owner, _SEQUENCE_TYPES):
        raise ReflectionError(
            "It is impossible to extract names from a sequence "
            "since it doesn't have named members."
        )
    raise ReflectionError(
        f"Type {owner.__qualname__} has no named fields to extract names from."
    )


def get_name(cls: Any, index: int) -> str:
    """Return the name of the field with position ``index``."""
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f"Field index must be an int, not {type(index).__name__}")
    names = names_as_tuple(cls)
    if not 0 <= index < len(names):
        raise IndexError(
            f"Field index {index} out of range for {len(names)} field(s)"
        )
    return names[index]


def _accepts_positional(func: Callable[..., Any], count: int) -> bool:
    """Tell whether ``func`` can be called with exactly ``count`` positional arguments."""
    target: Any = func
    bound = 0
    if isinstance(target, types.MethodType):
        target, bound = target.__func__, 1
    elif not isinstance(target, types.FunctionType):
        call = getattr(type(target), "__call__", None)
        if isinstance(call, types.FunctionType):
            target, bound = call, 1
    code = getattr(target, "__code__", None)
    if code is None:
        return False
    defaults = getattr(target, "__defaults__", None) or ()
    kwdefaults = getattr(target, "__kwdefaults__", None) or {}
    if code.co_kwonlyargcount > len(kwdefaults):
        return False
    positional = code.co_argcount - bound
    required = positional - len(defaults)
    if required > count:
        return False
    return bool(code.co_flags & _CO_VARARGS) or positional >= count


def for_each_field_with_name(value: Any, func: Callable[..., Any]) -> None:
    """Call ``func(name, field)`` for each field of a structure instance.

    When ``func`` accepts a third positional argument it also receives the
    field index.
    """
    names = names_as_tuple(value)
    values = field_values(value)
    with_index = _accepts_positional(func, 3)
    for index, (name, field) in enumerate(zip(names, values)):
        if with_index:
            func(name, field, index)
        else:
            func(name, field)