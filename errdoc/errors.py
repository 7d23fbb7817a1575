"""Exception hierarchy raised by errdoc."""

from __future__ import annotations

import traceback


class ErrDocError(RuntimeError):
    """Base class for errdoc failures.

    Every error carries a ``message`` and the ``trace`` captured where it was
    constructed, and stringifies to its message.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
        self.trace = traceback.StackSummary.from_list(traceback.extract_stack()[:-1])

    def __str__(self) -> str:
        return self.message


class ConfigError(ErrDocError):
    """Raised when the configuration file cannot be parsed."""


class ClassLoadError(ErrDocError):
    """Raised when a class manifest cannot be loaded."""

    def __init__(self, class_name: str, reason: str) -> None:
        super().__init__(f"Could not load {class_name}: {reason}")
        self.class_name = class_name
        self.reason = reason


class IntrospectionError(ErrDocError):
    """Raised when a class hierarchy violates the documentation contract."""

    def __init__(self, class_name: str, message: str) -> None:
        super().__init__(message)
        self.class_name = class_name


class MissingSuperclassesError(IntrospectionError):
    def __init__(self, class_name: str) -> None:
        super().__init__(class_name, f"{class_name} has no superclasses")


class MissingCommonAttributeError(IntrospectionError):
    def __init__(self, class_name: str, attribute: str) -> None:
        super().__init__(
            class_name,
            f"{class_name} does not have a {attribute} attribute",
        )
        self.attribute = attribute


class MalformedAttributeError(IntrospectionError):
    def __init__(self, class_name: str, attribute: str) -> None:
        super().__init__(
            class_name,
            f"{class_name} attribute {attribute} has neither a reader nor delegated methods",
        )
        self.attribute = attribute


__all__ = [
    "ClassLoadError",
    "ConfigError",
    "ErrDocError",
    "IntrospectionError",
    "MalformedAttributeError",
    "MissingCommonAttributeError",
    "MissingSuperclassesError",
]
