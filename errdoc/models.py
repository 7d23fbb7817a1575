"""Core data models shared across errdoc components."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

COMMON_ATTRIBUTES: tuple[str, ...] = ("message", "trace")
"""Attributes every exception class provides, documented once in the header."""

COMPOSITE_ROLE_SEPARATOR = "|"
UNCONSTRAINED = "Any"


@dataclass(frozen=True)
class TypeConstraint:
    """Declared restriction on the values an attribute may hold.

    ``kind`` is one of ``"class"`` (instance of ``name``), ``"role"`` (object
    doing the ``name`` role) or ``"named"`` (named scalar constraint).
    """

    kind: str
    name: str

    @property
    def unconstrained(self) -> bool:
        return self.kind == "named" and self.name == UNCONSTRAINED


@dataclass
class AttributeDefinition:
    """One declared attribute of an exception class."""

    name: str
    reader: Optional[str] = None
    handles: Dict[str, str] = field(default_factory=dict)
    type_constraint: Optional[TypeConstraint] = None
    documentation: Optional[str] = None


@dataclass
class ClassDefinition:
    """Declared metadata for one exception class."""

    name: str
    superclasses: List[str] = field(default_factory=list)
    roles: List[str] = field(default_factory=list)
    attributes: Dict[str, AttributeDefinition] = field(default_factory=dict)
    documentation: Optional[str] = None
    path: Optional[Path] = None


def root_base_definition(name: str) -> ClassDefinition:
    """Return the built-in root exception base providing the common attributes."""
    return ClassDefinition(
        name=name,
        attributes={
            "message": AttributeDefinition(
                name="message",
                reader="message",
                type_constraint=TypeConstraint("named", "Str"),
                documentation="The error message. Converting the exception to a string returns this value.",
            ),
            "trace": AttributeDefinition(
                name="trace",
                reader="trace",
                type_constraint=TypeConstraint("class", "traceback.StackSummary"),
                documentation="The call stack captured when the exception was created.",
            ),
        },
    )
