# fieldwise

Treat a record as a tuple of its fields. `fieldwise` reads, assigns,
compares, hashes, writes and reads back the fields of structure-like
values, in declaration order, without any code in the record type itself.

## What counts as a structure

- a dataclass (class or instance): its fields in declaration order;
- a named tuple (class or instance): its `_fields` in order;
- a `list`, `tuple` or `array.array` instance: its elements;
- a number (`int`, `float`, `complex`, `bool`): one field, the value itself.

Anything else raises `fieldwise.fields.ReflectionError` (a subclass of
`TypeError`). Dataclasses that inherit fields from a dataclass base, and
dataclasses declared with `init=False`, are rejected the same way, as are
`typing.Union` types. Use `fieldwise.fields.is_reflectable(value)` to check
first, `fields_count(value)` for the number of fields and
`field_values(value)` for their values as a tuple.

## Installation

```
pip install fieldwise
```

## Quick tour

```python
from dataclasses import dataclass

from fieldwise.core import get, set_field, structure_to_tuple, for_each_field
from fieldwise.names import get_name
from fieldwise.ops import eq_fields, lt_fields, hash_fields
from fieldwise.io import io_fields, read_fields


@dataclass
class Person:
    name: str
    birth_year: int


poe = Person("Edgar Allan Poe", 1809)

get(poe, 0)                 # 'Edgar Allan Poe'
get_name(Person, 1)         # 'birth_year'
structure_to_tuple(poe)     # ('Edgar Allan Poe', 1809)

set_field(poe, 1, 1810)
for_each_field(poe, print)  # prints each field in order

eq_fields(Person("a", 1), Person("a", 1))   # True
lt_fields(Person("a", 1), Person("a", 2))   # True
hash_fields(poe)                            # combined hash of all fields

str(io_fields(poe))         # '{"Edgar Allan Poe", 1810}'
read_fields('{"Ada", 1815}', poe)
```

## Modules

### `fieldwise.core`

- `get(value, index)` returns a field by position; a bad index raises
  `IndexError`, a non-int index `TypeError`.
- `get_by_type(value, field_type)` returns the one field whose type is
  exactly `field_type`; none or more than one raises `ReflectionError`.
- `set_field(value, index, new_value)` assigns a field of a dataclass
  instance or an element of a `list` or `array.array`. Frozen dataclasses,
  tuples and named tuples raise `ReflectionError`.
- `tuple_element(cls, index)` gives the declared type of a field (or the
  type of an element of a sequence instance).
- `structure_to_tuple(value)` returns the field values as a tuple.
- `structure_tie(value)` returns a `StructureTie` of `FieldRef` objects,
  one per field; `tie_from_structure(*refs)` ties chosen `FieldRef`s.
  `StructureTie.assign(values)` assigns each field (or element) of
  `values` to the tied targets and raises `ValueError` on a count mismatch.
  `FieldRef.get()` and `FieldRef.set(new_value)` read and write one field.
- `for_each_field(value, func)` calls `func(field)` for each field, or
  `func(field, index)` when `func` takes a second positional argument.

### `fieldwise.names`

- `get_name(cls, index)` and `names_as_tuple(cls)` return field names of a
  dataclass or named tuple (class or instance). Sequences and numbers have
  no names and raise `ReflectionError`.
- `for_each_field_with_name(value, func)` calls `func(name, field)`, or
  `func(name, field, index)` when `func` takes a third positional argument.

### `fieldwise.ops`

`eq_fields`, `ne_fields`, `lt_fields`, `gt_fields`, `le_fields`,
`ge_fields` compare two structures field by field, also across different
types. The common prefix of fields is compared first; if it is equal, the
structure with fewer fields orders first, and equality needs equal field
counts. Ordering uses only `<` on the fields. `hash_fields(value)` combines
the hashes of all fields into a 64-bit value.

### `fieldwise.functors`

Callable objects wrapping the functions above: `EqualTo`, `NotEqual`,
`Greater`, `Less`, `GreaterEqual`, `LessEqual` (called with two values)
and `Hash` (called with one).

### `fieldwise.io`

- `write_fields(value)` writes the fields between braces, separated by
  `", "`. Strings are quoted with `"` and `\` escaped by a backslash;
  nested dataclasses and sequences are written the same way; other
  values use `str()`.
- `io_fields(value)` wraps a value in `IoFields`, whose `str()` is
  `write_fields(value)`.
- `read_fields(text, value)` parses that form and assigns the fields of
  `value` (which must be assignable, see `set_field`), then returns it.
  Field types are taken from the values `value` holds now; booleans accept
  `True`/`true`/`1` and `False`/`false`/`0`. Malformed text or a wrong
  field count raises `ValueError`, and nothing is assigned unless the whole
  text parses.

## What it does not do

`fieldwise` is a library only: it has no command-line tool. It does not
reflect arbitrary classes, only the structure kinds listed above, and it
does not read text into a field that currently holds `None`.

## Running the tests

```
pip install "fieldwise[test]"
pytest
```