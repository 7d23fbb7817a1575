"""Discovery of exception class manifests on disk."""

from __future__ import annotations

import os
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterator

from .config import DEFAULT_PATTERN

CLASS_SEPARATOR = "."

_EXCLUDED_DIRS = {
    "__pycache__",
    "node_modules",
}


def _is_pruned(dirname: str) -> bool:
    return dirname.startswith(".") or dirname in _EXCLUDED_DIRS


def class_name_for_path(
    path: Path,
    root: Path,
    *,
    pattern: str = DEFAULT_PATTERN,
    namespace: str | None = None,
) -> str:
    """Derive a dotted class name from a manifest path below ``root``.

    ``root/http/NotFound.yml`` becomes ``http.NotFound``, prefixed with
    ``namespace`` when one is configured.
    """
    relative = path.relative_to(root)
    stem = relative.as_posix()
    suffix = _pattern_suffix(pattern) or relative.suffix
    if suffix and stem.endswith(suffix):
        stem = stem[: -len(suffix)]
    name = stem.replace("/", CLASS_SEPARATOR)
    return f"{namespace}{CLASS_SEPARATOR}{name}" if namespace else name


def _pattern_suffix(pattern: str) -> str:
    # "*.yml" strips ".yml"; patterns with wildcards after the last dot fall
    # back to the file's own suffix.
    if "." not in pattern:
        return ""
    suffix = pattern[pattern.rindex("."):]
    if any(char in suffix for char in "*?["):
        return ""
    return suffix


class ClassDiscoverer:
    """Walks a source directory and yields candidate class names."""

    def __init__(
        self,
        root: Path,
        *,
        pattern: str = DEFAULT_PATTERN,
        namespace: str | None = None,
    ) -> None:
        self.root = Path(root).expanduser().resolve()
        self.pattern = pattern
        self.namespace = namespace

    def iter_paths(self) -> Iterator[tuple[str, Path]]:
        """Yield ``(class_name, manifest_path)`` pairs in traversal order."""
        if not self.root.exists():
            raise FileNotFoundError(f"Exception source directory not found: {self.root}")
        if not self.root.is_dir():
            raise NotADirectoryError(f"Exception source path is not a directory: {self.root}")

        for dirpath, dirnames, filenames in os.walk(self.root):
            dirnames[:] = [name for name in dirnames if not _is_pruned(name)]
            current_dir = Path(dirpath)
            for filename in filenames:
                if not fnmatchcase(filename, self.pattern):
                    continue
                path = current_dir / filename
                if not path.is_file():
                    continue
                yield (
                    class_name_for_path(
                        path,
                        self.root,
                        pattern=self.pattern,
                        namespace=self.namespace,
                    ),
                    path,
                )

    def iter_class_names(self) -> Iterator[str]:
        """Yield class names lazily; ordering is not meaningful."""
        for name, _ in self.iter_paths():
            yield name


__all__ = ["CLASS_SEPARATOR", "ClassDiscoverer", "class_name_for_path"]
