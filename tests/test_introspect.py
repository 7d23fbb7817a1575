"""Tests for errdoc.introspect."""

from __future__ import annotations

import pytest

from errdoc.errors import MissingSuperclassesError


@pytest.fixture
def hierarchy(manifests):
    manifests.write(
        {
            "Base.yml": """
            superclasses: [Exception]
            roles: [Loggable, "Loggable|Retryable"]
            attributes:
              code: {reader: code, type: Int}
            """,
            "Child.yml": """
            superclasses: [Base]
            roles: [Retryable]
            attributes:
              code:
                reader: status_code
              detail: {reader: detail}
            """,
            "Orphan.yml": """
            superclasses: [Missing]
            attributes:
              extra: {reader: extra}
            """,
            "Loop.yml": "superclasses: [Loop]\n",
            "Rootless.yml": "roles: [Loggable]\n",
        }
    )
    return manifests.introspector()


def test_superclasses_preserves_order(manifests) -> None:
    manifests.write({"Multi.yml": "superclasses: [Zeta, Alpha, Exception]\n"})
    introspector = manifests.introspector()
    cls = introspector.loader.load("Multi")
    assert introspector.superclasses(cls) == ["Zeta", "Alpha", "Exception"]


def test_superclasses_empty_is_fatal(hierarchy) -> None:
    cls = hierarchy.loader.load("Rootless")
    with pytest.raises(MissingSuperclassesError) as excinfo:
        hierarchy.superclasses(cls)
    assert str(excinfo.value) == "Rootless has no superclasses"


def test_all_composed_roles_is_transitive_and_skips_composites(hierarchy) -> None:
    cls = hierarchy.loader.load("Child")
    assert hierarchy.all_composed_roles(cls) == {"Loggable", "Retryable"}


def test_find_attribute_prefers_nearest_declaration(hierarchy) -> None:
    cls = hierarchy.loader.load("Child")

    assert hierarchy.find_attribute(cls, "code").reader == "status_code"
    assert hierarchy.find_attribute(cls, "message").reader == "message"
    assert hierarchy.find_attribute(cls, "missing") is None


def test_all_attributes_includes_inherited(hierarchy) -> None:
    cls = hierarchy.loader.load("Child")
    names = sorted(attribute.name for attribute in hierarchy.all_attributes(cls))
    assert names == ["code", "detail", "message", "trace"]


def test_unloadable_superclass_contributes_nothing(hierarchy) -> None:
    cls = hierarchy.loader.load("Orphan")
    names = [attribute.name for attribute in hierarchy.all_attributes(cls)]
    assert names == ["extra"]
    assert hierarchy.find_attribute(cls, "message") is None


def test_cyclic_inheritance_terminates(hierarchy) -> None:
    cls = hierarchy.loader.load("Loop")
    assert hierarchy.all_attributes(cls) == []
    assert hierarchy.all_composed_roles(cls) == set()
