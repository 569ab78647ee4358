# optionalvalue

Optional values that remember whether they were set, independently of
whether the value they hold is empty.

A configuration field that is `0` or `""` is not the same as a field the
caller never supplied. `optionalvalue` keeps the two apart without falling
back on `None` for every field.

Two kinds of optional are provided:

- `Optional` (in `optionalvalue.optional`) for values that can be compared
  with their empty value, such as `int` or `str`. It can tell whether the
  held value is empty, and can set itself only when a value is not empty.
- `AnyOptional` (in `optionalvalue.any_optional`) for any value at all,
  including ones without a meaningful `==`. It tracks only whether a value
  was set.

Both are immutable: every changing operation returns a new optional and
leaves the original untouched.

## Installation

```
pip install optionalvalue
```

## Usage

Each optional is created with the empty value of its type, which is what
`value()` returns while nothing is set. When no empty value is given it is
`None`.

```python
from optionalvalue.optional import NotSetError, new_from_ptr, new_set, new_set_not_empty

port = new_from_ptr(None, 0)      # nothing supplied
port.is_set()                     # False
port.value()                      # 0

port = port.set_default(8080)     # applied: the port was not set
port = port.set_default(9090)     # ignored: the port is already set
port.value()                      # 8080

name = new_set_not_empty("", "")  # empty values are not taken
name.is_set()                     # False

name = name.set_auto("AppName")   # set, because it is not empty
name = name.set_auto("")          # unset again, because it is empty
name.is_set()                     # False

greeting = new_set("", "")        # new_set always marks the value as set
greeting.is_set()                 # True
greeting.is_empty()               # True

try:
    new_from_ptr(None, 0).must_value()
except NotSetError as exc:
    print(exc)                    # value is not set
```

`AnyOptional` works the same way for values of any type:

```python
from optionalvalue.any_optional import new_a_from_ptr, new_a_set

ports = new_a_from_ptr(None, [])
ports.is_set()                    # False

ports = ports.set([8080])
ports.must_value()                # [8080]

ports = ports.unset()
ports.value()                     # []

point = new_a_set({"x": 10, "y": 20}, {})
point.is_set()                    # True
```

The empty value is held as given, not copied, so a mutable empty value such
as `[]` is shared by every optional derived from the same one.

### Operations

| Operation            | `Optional` | `AnyOptional` | Effect                                                  |
|----------------------|:----------:|:-------------:|---------------------------------------------------------|
| `set(value)`         | yes        | yes           | holds `value`, marked as set                            |
| `set_ptr(value)`     | yes        | yes           | like `set`, but `None` unsets                           |
| `set_default(value)` | yes        | yes           | sets `value` only if nothing is set yet                 |
| `unset()`            | yes        | yes           | back to the empty value, not set                        |
| `set_not_empty(v)`   | yes        |               | sets `v` only if it is not empty, otherwise unchanged   |
| `set_auto(v)`        | yes        |               | holds `v`; set if it is not empty, unset if it is empty |
| `is_set()`           | yes        | yes           | whether a value was set                                 |
| `is_empty()`         | yes        |               | whether the held value equals the empty value           |
| `value()`            | yes        | yes           | the held value, or the empty value                      |
| `must_value()`       | yes        | yes           | the held value; raises `NotSetError` if not set         |

The module-level constructors are `new_set`, `new_set_not_empty` and
`new_from_ptr` for `Optional`, and `new_a_set` and `new_a_from_ptr` for
`AnyOptional`; each takes the empty value as its second argument.

`NotSetError` is a subclass of `ValueError`, and both kinds of optional
raise it.

Two `Optional` instances are equal when they hold the same value, have the
same set state and the same empty value; they are hashable when those values
are. `AnyOptional` does not compare by value.

## Running the tests

```
pip install "optionalvalue[test]"
pytest
```