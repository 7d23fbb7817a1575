"""Metadata queries over loaded class definitions."""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Set

from .errors import ClassLoadError, MissingSuperclassesError
from .loader import ManifestLoader
from .logging import get_logger
from .models import COMPOSITE_ROLE_SEPARATOR, AttributeDefinition, ClassDefinition


class MetadataIntrospector:
    """Answers inheritance-aware questions about exception classes."""

    def __init__(self, loader: ManifestLoader) -> None:
        self.loader = loader
        self.logger = get_logger("introspect")

    def superclasses(self, cls: ClassDefinition) -> List[str]:
        """Return the direct superclasses in declaration order."""
        if not cls.superclasses:
            raise MissingSuperclassesError(cls.name)
        return list(cls.superclasses)

    def all_composed_roles(self, cls: ClassDefinition) -> Set[str]:
        """Return every role consumed by the class or its ancestors.

        Composite roles (names joined with ``|``) are synthesized combinations
        and are left out.
        """
        roles: Set[str] = set()
        for definition in self._linearize(cls):
            roles.update(
                role for role in definition.roles if COMPOSITE_ROLE_SEPARATOR not in role
            )
        return roles

    def find_attribute(self, cls: ClassDefinition, name: str) -> Optional[AttributeDefinition]:
        for definition in self._linearize(cls):
            attribute = definition.attributes.get(name)
            if attribute is not None:
                return attribute
        return None

    def all_attributes(self, cls: ClassDefinition) -> List[AttributeDefinition]:
        """Return own and inherited attributes; the nearest declaration wins."""
        found: Dict[str, AttributeDefinition] = {}
        for definition in self._linearize(cls):
            for name, attribute in definition.attributes.items():
                found.setdefault(name, attribute)
        return list(found.values())

    def _linearize(self, cls: ClassDefinition) -> Iterator[ClassDefinition]:
        # Depth-first, left-to-right; each class is visited once so cyclic
        # manifests terminate.
        seen: Set[str] = set()
        stack: List[ClassDefinition] = [cls]
        while stack:
            current = stack.pop()
            if current.name in seen:
                continue
            seen.add(current.name)
            yield current
            parents: List[ClassDefinition] = []
            for parent_name in current.superclasses:
                if parent_name in seen:
                    continue
                try:
                    parents.append(self.loader.load(parent_name))
                except ClassLoadError as exc:
                    self.logger.debug("Ignoring superclass of %s: %s", current.name, exc)
            stack.extend(reversed(parents))


__all__ = ["MetadataIntrospector"]
