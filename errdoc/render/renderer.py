"""Renders exception class metadata into the Markdown reference document."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from jinja2 import Environment, FileSystemLoader

from ..config import DEFAULT_ROOT_BASE, DEFAULT_TITLE
from ..errors import MalformedAttributeError, MissingCommonAttributeError
from ..introspect import MetadataIntrospector
from ..logging import get_logger
from ..models import (
    COMMON_ATTRIBUTES,
    AttributeDefinition,
    ClassDefinition,
    TypeConstraint,
    root_base_definition,
)
from .prose import (
    article_for,
    link,
    linked_join,
    oxford_join,
    pluralize,
    separate_code_blocks,
)

TOC_PLACEHOLDER = "<!-- errdoc:toc -->"
BEGIN_MARKER = "<!-- errdoc:begin:reference -->"
END_MARKER = "<!-- errdoc:end:reference -->"

ACCESSOR_PREFIX = "exception"


@dataclass
class AttributeEntry:
    """One item of a class's attribute list."""

    accessor: str
    returns: Optional[str] = None
    documentation: Optional[str] = None


@dataclass
class ClassBlock:
    """Rendered pieces of one class section."""

    name: str
    sentences: List[str] = field(default_factory=list)
    entries: List[AttributeEntry] = field(default_factory=list)
    no_attributes: Optional[str] = None


def describe_constraint(constraint: TypeConstraint) -> tuple[str, str]:
    """Return ``(leading word, description)`` for a constraint."""
    if constraint.kind == "class":
        return constraint.name, f"{link(constraint.name)} object"
    if constraint.kind == "role":
        return "object", f"object which does the {link(constraint.name)} role"
    return constraint.name, f"{constraint.name} value"


def returns_sentence(constraint: TypeConstraint | None) -> Optional[str]:
    """Return the "Returns a ..." line, or None for unconstrained attributes."""
    if constraint is None or constraint.unconstrained:
        return None
    leading, description = describe_constraint(constraint)
    return f"Returns {article_for(leading)} {description}."


class DocumentRenderer:
    """Turns class definitions into Markdown via Jinja templates."""

    def __init__(
        self,
        introspector: MetadataIntrospector,
        *,
        root_base: str = DEFAULT_ROOT_BASE,
        templates_dir: Path | None = None,
    ) -> None:
        self.introspector = introspector
        self.root_base = root_base
        self.templates_dir = templates_dir or Path(__file__).with_name("templates")
        self._env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.logger = get_logger("renderer")

    def render_document(
        self,
        classes: Iterable[ClassDefinition],
        *,
        title: str = DEFAULT_TITLE,
    ) -> str:
        """Render every class, sorted by name, between the header and footer.

        All blocks are built before any text is produced, so an invalid class
        aborts the whole document.
        """
        blocks = [self.build_block(cls) for cls in sorted(classes, key=lambda cls: cls.name)]
        common_entries = self.common_entries()
        template = self._env.get_template("document.md.j2")
        return (
            template.render(
                title=title,
                root_base=self.root_base,
                common_accessors=[f"`{entry.accessor}`" for entry in common_entries],
                common_entries=common_entries,
                toc_placeholder=TOC_PLACEHOLDER,
                begin_marker=BEGIN_MARKER,
                end_marker=END_MARKER,
                classes=blocks,
            ).strip()
            + "\n"
        )

    def common_entries(self) -> List[AttributeEntry]:
        """Entries for the readers every class inherits from the root base."""
        root = root_base_definition(self.root_base)
        entries: List[AttributeEntry] = []
        for name in COMMON_ATTRIBUTES:
            entries.extend(self._entries_for(root, root.attributes[name]))
        return entries

    def render_class(self, cls: ClassDefinition) -> str:
        template = self._env.get_template("class.md.j2")
        return template.render(block=self.build_block(cls)).strip() + "\n"

    def build_block(self, cls: ClassDefinition) -> ClassBlock:
        self.logger.debug("Rendering %s", cls.name)
        block = ClassBlock(name=cls.name)

        superclass_sentence = self._superclass_sentence(cls)
        if superclass_sentence:
            block.sentences.append(superclass_sentence)
        role_sentence = self._role_sentence(cls)
        if role_sentence:
            block.sentences.append(role_sentence)
        if cls.documentation:
            block.sentences.append(separate_code_blocks(cls.documentation.strip()))

        attributes = self._documented_attributes(cls)
        if not attributes:
            names = oxford_join([f"`{name}`" for name in COMMON_ATTRIBUTES])
            block.no_attributes = f"This class has no attributes except for {names}."
            return block

        for attribute in attributes:
            block.entries.extend(self._entries_for(cls, attribute))
        return block

    def _superclass_sentence(self, cls: ClassDefinition) -> Optional[str]:
        superclasses = self.introspector.superclasses(cls)
        if superclasses == [self.root_base]:
            return None
        return f"This class is a subclass of {linked_join(superclasses)}."

    def _role_sentence(self, cls: ClassDefinition) -> Optional[str]:
        roles = sorted(self.introspector.all_composed_roles(cls))
        if not roles:
            return None
        noun = pluralize("role", len(roles))
        return f"This class consumes the {oxford_join(roles)} {noun}."

    def _documented_attributes(self, cls: ClassDefinition) -> Sequence[AttributeDefinition]:
        for name in COMMON_ATTRIBUTES:
            if self.introspector.find_attribute(cls, name) is None:
                raise MissingCommonAttributeError(cls.name, name)
        return sorted(
            (
                attribute
                for attribute in self.introspector.all_attributes(cls)
                if attribute.name not in COMMON_ATTRIBUTES
            ),
            key=lambda attribute: attribute.name,
        )

    def _entries_for(
        self, cls: ClassDefinition, attribute: AttributeDefinition
    ) -> List[AttributeEntry]:
        documentation = None
        if attribute.documentation and attribute.documentation.strip():
            documentation = separate_code_blocks(attribute.documentation.rstrip())

        if attribute.reader:
            return [
                AttributeEntry(
                    accessor=f"{ACCESSOR_PREFIX}.{attribute.reader}",
                    returns=returns_sentence(attribute.type_constraint),
                    documentation=documentation,
                )
            ]
        if attribute.handles:
            return [
                AttributeEntry(
                    accessor=f"{ACCESSOR_PREFIX}.{method}",
                    documentation=documentation,
                )
                for method in sorted(attribute.handles)
            ]
        raise MalformedAttributeError(cls.name, attribute.name)


__all__ = [
    "AttributeEntry",
    "ClassBlock",
    "DocumentRenderer",
    "describe_constraint",
    "returns_sentence",
]
