"""Assertion helpers for exception stringification in test suites.

These mirror how exception classes are expected to behave: converting one to
a string yields its ``message``.
"""

from __future__ import annotations

from typing import Any

_OPERATOR_METHODS = frozenset(
    {
        "__str__",
        "__bytes__",
        "__format__",
        "__bool__",
        "__eq__",
        "__ne__",
        "__lt__",
        "__le__",
        "__gt__",
        "__ge__",
        "__add__",
        "__sub__",
        "__mul__",
        "__truediv__",
        "__int__",
        "__float__",
    }
)


def _qualified_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


def _defining_class(cls: type, method: str) -> type | None:
    for klass in cls.__mro__:
        if method in vars(klass):
            return klass
    return None


def overloads_method(cls: type, method: str) -> bool:
    """Return True when ``method`` comes from a class outside the builtins."""
    owner = _defining_class(cls, method)
    return owner is not None and owner.__module__ != "builtins"


def is_overloaded(cls: type) -> bool:
    return any(overloads_method(cls, method) for method in _OPERATOR_METHODS)


def _check(condition: bool, message: str) -> None:
    """Raise ``AssertionError(message)`` unless ``condition`` holds, even under ``-O``."""
    if not condition:
        raise AssertionError(message)


def assert_overloading_for_class(cls: type) -> None:
    name = _qualified_name(cls)
    _check(is_overloaded(cls), f"{name} is overloaded")
    _check(overloads_method(cls, "__str__"), f"{name} overloads stringification")


def assert_no_overloading_for_class(cls: type) -> None:
    name = _qualified_name(cls)
    _check(not is_overloaded(cls), f"{name} is not overloaded")
    _check(not overloads_method(cls, "__str__"), f"{name} does not overload stringification")


def assert_overloading_for_object(cls_or_obj: Any, thing: str | None = None) -> None:
    """Assert that an exception stringifies to its message.

    A class is instantiated with ``message="foo"``; an instance is checked
    against its own ``message``.
    """
    if isinstance(cls_or_obj, type):
        obj = cls_or_obj(message="foo")
        expected = "foo"
        label = thing or f"{_qualified_name(cls_or_obj)} object"
    else:
        obj = cls_or_obj
        expected = obj.message
        label = thing or f"{_qualified_name(type(obj))} object"
    _check(str(obj) == expected, f"{label} stringifies to value of message attribute")


__all__ = [
    "assert_no_overloading_for_class",
    "assert_overloading_for_class",
    "assert_overloading_for_object",
    "is_overloaded",
    "overloads_method",
]
