"""Tuple-like access to the fields of structures: indexing, ties and iteration."""

from __future__ import annotations

import array
import dataclasses
import types
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from .fields import ReflectionError, field_values, fields_count

__all__ = [
    "FieldRef",
    "StructureTie",
    "get",
    "get_by_type",
    "set_field",
    "tuple_element",
    "structure_to_tuple",
    "structure_tie",
    "for_each_field",
    "tie_from_structure",
]

_MUTABLE_SEQUENCES = (list, array.array)
_CO_VARARGS = 0x04


def _check_index(count: int, index: Any) -> int:
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f"Field index must be an int, not {type(index).__name__}")
    if not 0 <= index < count:
        raise IndexError(f"Field index {index} out of range for {count} field(s)")
    return index


def _named_fields(cls: type) -> tuple[str, ...] | None:
    if dataclasses.is_dataclass(cls):
        return tuple(f.name for f in dataclasses.fields(cls))
    fields = getattr(cls, "_fields", None)
    if issubclass(cls, tuple) and isinstance(fields, tuple):
        return fields
    return None


def get(value: Any, index: int) -> Any:
    """Return the field with position ``index`` of a structure instance."""
    values = field_values(value)
    return values[_check_index(len(values), index)]


def get_by_type(value: Any, field_type: type) -> Any:
    """Return the only field of ``value`` whose type is exactly ``field_type``."""
    matches = [v for v in field_values(value) if type(v) is field_type]
    if not matches:
        raise ReflectionError(f"No field of type {field_type.__qualname__}")
    if len(matches) > 1:
        raise ReflectionError(
            f"More than one field of type {field_type.__qualname__}"
        )
    return matches[0]


def set_field(value: Any, index: int, new_value: Any) -> None:
    """Assign ``new_value`` to the field with position ``index`` of ``value``."""
    if isinstance(value, type):
        raise ReflectionError("Fields can only be assigned on an instance.")
    _check_index(fields_count(value), index)
    if dataclasses.is_dataclass(value):
        name = dataclasses.fields(value)[index].name
        try:
            setattr(value, name, new_value)
        except dataclasses.FrozenInstanceError as exc:
            raise ReflectionError(
                f"Cannot assign field {name!r} of a frozen instance"
            ) from exc
        return
    if isinstance(value, _MUTABLE_SEQUENCES):
        value[index] = new_value
        return
    raise ReflectionError(
        f"Fields of {type(value).__qualname__} are immutable and cannot be assigned"
    )


def _annotations_of(owner: type) -> dict[str, Any]:
    hints: dict[str, Any] = {}
    for klass in reversed(owner.__mro__):
        hints.update(klass.__dict__.get("__annotations__", {}))
    return hints


def tuple_element(cls: Any, index: int) -> Any:
    """Return the type of the field with position ``index``.

    Classes report their declared field types; sequence instances report
    the type of the stored element.
    """
    count = fields_count(cls)
    _check_index(count, index)
    owner = cls if isinstance(cls, type) else type(cls)
    names = _named_fields(owner)
    if names is not None:
        hints = _annotations_of(owner)
        if dataclasses.is_dataclass(owner):
            declared = {f.name: f.type for f in dataclasses.fields(owner)}
            return hints.get(names[index], declared[names[index]])
        return hints.get(names[index], Any)
    if isinstance(cls, _MUTABLE_SEQUENCES + (tuple,)):
        return type(cls[index])
    return owner


def structure_to_tuple(value: Any) -> tuple[Any, ...]:
    """Return a tuple holding the values of the fields of ``value``."""
    return field_values(value)


@dataclasses.dataclass(frozen=True)
class FieldRef:
    """A reference to one field of a structure instance."""

    owner: Any
    index: int

    def get(self) -> Any:
        """Return the current value of the field."""
        return get(self.owner, self.index)

    def set(self, new_value: Any) -> None:
        """Assign a new value to the field."""
        set_field(self.owner, self.index, new_value)


class StructureTie:
    """An ordered group of field references that can be assigned at once."""

    def __init__(self, refs: Iterable[FieldRef]) -> None:
        self._refs = tuple(refs)
        for ref in self._refs:
            if not isinstance(ref, FieldRef):
                raise TypeError(
                    f"Tie targets must be FieldRef objects, not {type(ref).__name__}"
                )

    def __len__(self) -> int:
        return len(self._refs)

    def __iter__(self) -> Iterator[FieldRef]:
        return iter(self._refs)

    def __getitem__(self, index: int) -> FieldRef:
        return self._refs[index]

    def __repr__(self) -> str:
        return f"StructureTie({list(self._refs)!r})"

    def assign(self, values: Any) -> None:
        """Assign each field or element of ``values`` to the tied targets."""
        try:
            items = field_values(values)
        except ReflectionError:
            items = tuple(values)
        if len(items) != len(self._refs):
            raise ValueError(
                f"Cannot assign {len(items)} value(s) to {len(self._refs)} tied target(s)"
            )
        for ref, item in zip(self._refs, items):
            ref.set(item)


def structure_tie(value: Any) -> StructureTie:
    """Tie all the fields of a structure instance together."""
    if isinstance(value, type):
        raise ReflectionError("Fields can only be tied on an instance.")
    return StructureTie(FieldRef(value, i) for i in range(fields_count(value)))


def tie_from_structure(*args: FieldRef) -> StructureTie:
    """Tie the given field references so a structure can be unpacked into them."""
    return StructureTie(args)


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


def for_each_field(value: Any, func: Callable[..., Any]) -> None:
    """Call ``func`` on each field of ``value``.

    ``func`` receives the field value, and also the field index when it
    accepts a second positional argument.
    """
    with_index = _accepts_positional(func, 2)
    for index, field in enumerate(field_values(value)):
        if with_index:
            func(field, index)
        else:
            func(field)