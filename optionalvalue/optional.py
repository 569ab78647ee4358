"""Optional values that know both whether they are set and whether they are empty."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

V = TypeVar("V")

__all__ = [
    "NotSetError",
    "Optional",
    "new_from_ptr",
    "new_set",
    "new_set_not_empty",
]


class NotSetError(ValueError):
    """Raised when the value of an unset optional is demanded."""

    def __init__(self, message: str = "value is not set") -> None:
        super().__init__(message)


class Optional(Generic[V]):
    """An immutable optional value.

    ``empty`` is the value the optional holds when nothing is set. It is also
    what ``is_empty`` compares against, so the value type must support ``==``.
    Every modifying method returns a new instance and leaves the original
    untouched.
    """

    __slots__ = ("_empty", "_value", "_is_set")

    def __init__(self, empty: Any = None) -> None:
        self._empty = empty
        self._value = empty
        self._is_set = False

    def _replace(self, value: Any, is_set: bool) -> "Optional[V]":
        new = object.__new__(type(self))
        new._empty = self._empty
        new._value = value
        new._is_set = is_set
        return new

    def set(self, value: V) -> "Optional[V]":
        """Return a copy holding ``value`` and marked as set."""
        return self._replace(value, True)

    def set_ptr(self, ptr: V | None) -> "Optional[V]":
        """Return a copy holding ``ptr``, or an unset copy when ``ptr`` is None."""
        if ptr is None:
            return self._replace(self._empty, False)
        return self._replace(ptr, True)

    def set_not_empty(self, value: V) -> "Optional[V]":
        """Return a copy holding ``value`` unless it is empty; otherwise unchanged."""
        if value == self._empty:
            return self
        return self._replace(value, True)

    def set_auto(self, value: V) -> "Optional[V]":
        """Return a copy holding ``value``, set only when it is not empty."""
        return self._replace(value, value != self._empty)

    def unset(self) -> "Optional[V]":
        """Return an unset copy holding the empty value."""
        return self._replace(self._empty, False)

    def is_set(self) -> bool:
        """Whether a value has been set."""
        return self._is_set

    def must_value(self) -> V:
        """Return the value, raising NotSetError when it is not set."""
        if not self._is_set:
            raise NotSetError()
        return self._value

    def value(self) -> V:
        """Return the value, or the empty value when it is not set."""
        return self._value

    def is_empty(self) -> bool:
        """Whether the held value equals the empty value, set or not."""
        return self._value == self._empty

    def set_default(self, value: V) -> "Optional[V]":
        """Return a copy holding ``value`` if nothing is set; otherwise unchanged."""
        if self._is_set:
            return self
        return self._replace(value, True)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Optional):
            return NotImplemented
        return (self._value, self._is_set, self._empty) == (
            other._value,
            other._is_set,
            other._empty,
        )

    def __hash__(self) -> int:
        return hash((self._value, self._is_set, self._empty))

    def __repr__(self) -> str:
        if self._is_set:
            return f"{type(self).__name__}({self._value!r})"
        return f"{type(self).__name__}(<unset>)"


def new_from_ptr(ptr: V | None, empty: Any = None) -> Optional[V]:
    """Create an optional from ``ptr``; it is unset when ``ptr`` is None."""
    return Optional(empty).set_ptr(ptr)


def new_set_not_empty(value: V, empty: Any = None) -> Optional[V]:
    """Create an optional that is set only when ``value`` is not empty."""
    return Optional(empty).set_not_empty(value)


def new_set(value: V, empty: Any = None) -> Optional[V]:
    """Create an optional that is always set, even to the empty value."""
    return Optional(empty).set(value)