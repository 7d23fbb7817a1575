"""Tests for the stringification assertion helpers."""

from __future__ import annotations

import subprocess
import sys
import textwrap
from pathlib import Path

import pytest

from errdoc import errors
from errdoc.testing import (
    assert_no_overloading_for_class,
    assert_overloading_for_class,
    assert_overloading_for_object,
    is_overloaded,
    overloads_method,
)

REPO_ROOT = Path(__file__).resolve().parents[1]


class PlainError(Exception):
    pass


class ComparableError(Exception):
    def __eq__(self, other: object) -> bool:
        return isinstance(other, ComparableError)

    __hash__ = Exception.__hash__


class MessageError(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class WrongMessageError(MessageError):
    def __str__(self) -> str:
        return f"error: {self.message}"


@pytest.mark.parametrize(
    "cls",
    [
        errors.ErrDocError,
        errors.ConfigError,
        errors.ClassLoadError,
        errors.IntrospectionError,
        errors.MissingSuperclassesError,
        errors.MissingCommonAttributeError,
        errors.MalformedAttributeError,
    ],
)
def test_errdoc_errors_overload_stringification(cls) -> None:
    assert_overloading_for_class(cls)


@pytest.mark.parametrize("cls", [errors.ErrDocError, errors.ConfigError])
def test_errdoc_errors_stringify_to_message(cls) -> None:
    assert_overloading_for_object(cls)


@pytest.mark.parametrize(
    "error",
    [
        errors.ClassLoadError("Foo", "manifest is empty"),
        errors.MissingSuperclassesError("Foo"),
        errors.MissingCommonAttributeError("Foo", "trace"),
        errors.MalformedAttributeError("Foo", "code"),
    ],
)
def test_errdoc_error_objects_stringify_to_message(error) -> None:
    assert_overloading_for_object(error, thing=type(error).__name__)


def test_plain_exception_is_not_overloaded() -> None:
    assert_no_overloading_for_class(PlainError)
    assert not is_overloaded(Exception)


def test_operator_overloading_without_str() -> None:
    assert is_overloaded(ComparableError)
    assert not overloads_method(ComparableError, "__str__")
    with pytest.raises(AssertionError, match="overloads stringification"):
        assert_overloading_for_class(ComparableError)
    with pytest.raises(AssertionError, match="is not overloaded"):
        assert_no_overloading_for_class(ComparableError)


def test_assert_no_overloading_fails_for_custom_str() -> None:
    with pytest.raises(AssertionError, match="MessageError is not overloaded"):
        assert_no_overloading_for_class(MessageError)


def test_assert_overloading_for_object_reports_mismatch() -> None:
    with pytest.raises(AssertionError, match="WrongMessageError object stringifies"):
        assert_overloading_for_object(WrongMessageError)
    assert_overloading_for_object(MessageError, thing="custom error")


def test_assertions_still_fail_under_optimized_interpreter() -> None:
    script = textwrap.dedent(
        """
        from errdoc.testing import assert_overloading_for_class

        class PlainError(Exception):
            pass

        assert_overloading_for_class(PlainError)
        """
    )

    completed = subprocess.run(
        [sys.executable, "-O", "-c", script],
        cwd=REPO_ROOT,
        capture_output=True,
        text=True,
        check=False,
    )

    assert completed.returncode != 0
    assert "AssertionError" in completed.stderr
    assert "PlainError is overloaded" in completed.stderr
