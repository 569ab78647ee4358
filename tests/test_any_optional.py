from dataclasses import dataclass, field

import pytest

from optionalvalue.any_optional import AnyOptional, new_a_from_ptr, new_a_set
from optionalvalue.optional import NotSetError


@dataclass
class User:
    id: int
    names: list = field(default_factory=list)


@dataclass
class Point:
    x: int
    y: int


@pytest.mark.parametrize(
    ("start", "calls", "expected"),
    [
        (AnyOptional(""), [("set", "AppName")], (True, "AppName")),
        (AnyOptional(0), [("set", 8080), ("unset",)], (False, 0)),
        (AnyOptional(0), [], (False, 0)),
        (AnyOptional(0), [("set_default", 8080), ("set_default", 9090)], (True, 8080)),
        (AnyOptional(0), [("set_ptr", 8080)], (True, 8080)),
        (AnyOptional(0), [("set_ptr", 8080), ("set_ptr", None)], (False, 0)),
        (AnyOptional(), [], (False, None)),
        (AnyOptional(), [("set", [8080])], (True, [8080])),
    ],
)
def test_call_chain(start, calls, expected):
    result = start
    for name, *args in calls:
        result = getattr(result, name)(*args)
    assert (result.is_set(), result.value()) == expected


def test_must_value():
    port = AnyOptional(0)
    with pytest.raises(NotSetError, match="value is not set"):
        port.must_value()
    assert port.set(8080).must_value() == 8080


def test_with_non_comparable_like_type():
    user_opt = AnyOptional().set(User(id=1, names=["John"]))
    assert user_opt.is_set() is True
    assert user_opt.value() == User(id=1, names=["John"])


def test_new_a_set():
    point_opt = new_a_set(Point(x=10, y=20))
    assert point_opt.is_set() is True
    assert point_opt.value() == Point(10, 20)


@pytest.mark.parametrize(("extra", "empty"), [((), None), ((0,), 0)])
def test_new_a_from_nil_ptr(extra, empty):
    opt = new_a_from_ptr(None, *extra)
    assert opt.is_set() is False
    assert opt.value() == empty


def test_new_a_from_ptr_keeps_object():
    user = User(id=1, names=["John"])
    opt = new_a_from_ptr(user)
    assert opt.is_set() is True
    assert opt.value() is user


def test_methods_do_not_mutate_original():
    original = AnyOptional(0)
    changed = original.set(7)
    assert original.is_set() is False
    assert changed.must_value() == 7


@pytest.mark.parametrize(
    ("opt", "text"),
    [(new_a_set(3), "AnyOptional(3)"), (AnyOptional(), "AnyOptional(<unset>)")],
)
def test_repr(opt, text):
    assert repr(opt) == text