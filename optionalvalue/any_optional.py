"""Optional values of any type, tracking only whether they are set."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from optionalvalue.optional import NotSetError

V = TypeVar("V")

__all__ = ["AnyOptional", "new_a_from_ptr", "new_a_set"]


class AnyOptional(Generic[V]):
    """An immutable optional value of any type.

    Unlike ``Optional`` it never compares values, so it suits types without a
    meaningful ``==``. ``empty`` is what it holds while unset. Every modifying
    method returns a new instance.
    """

    __slots__ = ("_empty", "_value", "_is_set")

    def __init__(self, empty: Any = None) -> None:
        self._empty = empty
        self._value = empty
        self._is_set = False

    def _replace(self, value: Any, is_set: bool) -> "AnyOptional[V]":
        new = object.__new__(type(self))
        new._empty = self._empty
        new._value = value
        new._is_set = is_set
        return new

    def set(self, value: V) -> "AnyOptional[V]":
        """Return a copy holding ``value`` and marked as set."""
        return self._replace(value, True)

    def set_ptr(self, ptr: V | None) -> "AnyOptional[V]":
        """Return a copy holding ``ptr``, or an unset copy when ``ptr`` is None."""
        if ptr is None:
            return self._replace(self._empty, False)
        return self._replace(ptr, True)

    def unset(self) -> "AnyOptional[V]":
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

    def set_default(self, value: V) -> "AnyOptional[V]":
        """Return a copy holding ``value`` if nothing is set; otherwise unchanged."""
        if self._is_set:
            return self
        return self._replace(value, True)

    def __repr__(self) -> str:
        if self._is_set:
            return f"{type(self).__name__}({self._value!r})"
        return f"{type(self).__name__}(<unset>)"


def new_a_from_ptr(ptr: V | None, empty: Any = None) -> AnyOptional[V]:
    """Create an optional from ``ptr``; it is unset when ``ptr`` is None."""
    return AnyOptional(empty).set_ptr(ptr)


def new_a_set(value: V, empty: Any = None) -> AnyOptional[V]:
    """Create an optional that is always set."""
    return AnyOptional(empty).set(value)