"""Loading of declarative exception class manifests."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

from .config import DEFAULT_ROOT_BASE
from .errors import ClassLoadError
from .logging import get_logger
from .models import AttributeDefinition, ClassDefinition, TypeConstraint, root_base_definition

_CONSTRAINT_KEYS: Dict[str, str] = {
    "isa": "class",
    "does": "role",
    "type": "named",
}


class ManifestLoader:
    """Resolves class names to parsed ``ClassDefinition`` objects.

    Manifest paths are keyed by class name (usually from ``ClassDiscoverer``)
    and parsed lazily on first ``load``. The root base is always available.
    """

    def __init__(
        self,
        paths: Mapping[str, Path] | None = None,
        *,
        root_base: str = DEFAULT_ROOT_BASE,
    ) -> None:
        self.root_base = root_base
        self._paths: Dict[str, Path] = dict(paths or {})
        self._cache: Dict[str, ClassDefinition] = {
            root_base: root_base_definition(root_base),
        }
        self.logger = get_logger("loader")

    def load(self, class_name: str) -> ClassDefinition:
        """Return the definition for ``class_name`` or raise ``ClassLoadError``."""
        cached = self._cache.get(class_name)
        if cached is not None:
            return cached

        path = self._paths.get(class_name)
        if path is None:
            raise ClassLoadError(class_name, "no manifest found for this class")

        self.logger.debug("Loading %s from %s", class_name, path)
        definition = parse_manifest(class_name, _read_manifest(class_name, path), path=path)
        self._cache[class_name] = definition
        return definition


def _read_manifest(class_name: str, path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ClassLoadError(class_name, f"{path.name} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise ClassLoadError(class_name, f"cannot read {path}: {exc}") from exc
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ClassLoadError(class_name, f"invalid YAML in {path.name}: {exc}") from exc


def parse_manifest(class_name: str, data: Any, *, path: Path | None = None) -> ClassDefinition:
    """Build a ``ClassDefinition`` from decoded manifest data."""
    if data is None:
        raise ClassLoadError(class_name, "manifest is empty")
    if not isinstance(data, dict):
        raise ClassLoadError(class_name, "manifest must contain a mapping at the root")

    return ClassDefinition(
        name=class_name,
        superclasses=_as_name_list(class_name, "superclasses", data.get("superclasses")),
        roles=_as_name_list(class_name, "roles", data.get("roles")),
        attributes=_parse_attributes(class_name, data.get("attributes")),
        documentation=_as_text(class_name, "documentation", data.get("documentation")),
        path=path,
    )


def _parse_attributes(class_name: str, value: Any) -> Dict[str, AttributeDefinition]:
    if value is None:
        return {}

    entries: List[tuple[Any, Any]] = []
    if isinstance(value, dict):
        entries.extend(value.items())
    elif isinstance(value, list):
        # A list of single-key mappings keeps the author's declaration order.
        for item in value:
            if not isinstance(item, dict) or len(item) != 1:
                raise ClassLoadError(
                    class_name, "attribute list entries must be single-key mappings"
                )
            entries.extend(item.items())
    else:
        raise ClassLoadError(class_name, "attributes must be a mapping or a list")

    attributes: Dict[str, AttributeDefinition] = {}
    for name, fields in entries:
        if not isinstance(name, str) or not name:
            raise ClassLoadError(class_name, f"invalid attribute name {name!r}")
        if name in attributes:
            raise ClassLoadError(class_name, f"attribute {name} is declared twice")
        attributes[name] = _parse_attribute(class_name, name, fields)
    return attributes


def _parse_attribute(class_name: str, name: str, fields: Any) -> AttributeDefinition:
    if fields is None:
        return AttributeDefinition(name=name)
    if not isinstance(fields, dict):
        raise ClassLoadError(class_name, f"attribute {name} must be a mapping")

    context = f"attribute {name}"
    return AttributeDefinition(
        name=name,
        reader=_as_text(class_name, f"{context} reader", fields.get("reader")),
        handles=_as_handles(class_name, context, fields.get("handles")),
        type_constraint=_as_constraint(class_name, context, fields),
        documentation=_as_text(class_name, f"{context} documentation", fields.get("documentation")),
    )


def _as_constraint(class_name: str, context: str, fields: Dict[str, Any]) -> Optional[TypeConstraint]:
    present = [key for key in _CONSTRAINT_KEYS if fields.get(key) is not None]
    if not present:
        return None
    if len(present) > 1:
        raise ClassLoadError(
            class_name, f"{context} declares more than one of {', '.join(present)}"
        )
    key = present[0]
    target = _as_text(class_name, f"{context} {key}", fields[key])
    if not target or not target.strip():
        raise ClassLoadError(class_name, f"{context} {key} must name a type")
    return TypeConstraint(kind=_CONSTRAINT_KEYS[key], name=target.strip())


def _as_handles(class_name: str, context: str, value: Any) -> Dict[str, str]:
    if value is None:
        return {}
    if isinstance(value, str):
        return {value: value}
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return {item: item for item in value}
    if isinstance(value, dict) and all(
        isinstance(key, str) and isinstance(target, str) for key, target in value.items()
    ):
        return dict(value)
    raise ClassLoadError(class_name, f"{context} handles must map method names to targets")


def _as_name_list(class_name: str, field_name: str, value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return list(value)
    raise ClassLoadError(class_name, f"{field_name} must be a name or a list of names")


def _as_text(class_name: str, field_name: str, value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise ClassLoadError(class_name, f"{field_name} must be a string")
    return str(value)


__all__ = ["ManifestLoader", "parse_manifest"]
