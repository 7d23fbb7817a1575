"""Helper utilities for writing exception manifests in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Mapping

from errdoc.config import ErrDocConfig
from errdoc.discovery import ClassDiscoverer
from errdoc.introspect import MetadataIntrospector
from errdoc.loader import ManifestLoader


class ManifestBuilder:
    """Writes ``relative path -> YAML`` manifests into a throwaway source directory."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "project"
        self.source = self.root / "exceptions"
        self.source.mkdir(parents=True)

    def write(self, files: Mapping[str, str]) -> None:
        for relative, content in files.items():
            path = self.source / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def config(self, **overrides: object) -> ErrDocConfig:
        config = ErrDocConfig(root=self.root, source_dir=self.source)
        for key, value in overrides.items():
            setattr(config, key, value)
        return config

    def loader(self) -> ManifestLoader:
        return ManifestLoader(dict(ClassDiscoverer(self.source).iter_paths()))

    def introspector(self) -> MetadataIntrospector:
        return MetadataIntrospector(self.loader())


__all__ = ["ManifestBuilder"]
