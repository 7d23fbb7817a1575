"""Configuration loading for errdoc (.errdoc.yml)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError

CONFIG_FILENAME = ".errdoc.yml"

DEFAULT_SOURCE_DIR = "exceptions"
DEFAULT_PATTERN = "*.yml"
DEFAULT_ROOT_BASE = "Exception"
DEFAULT_TITLE = "Exception Reference"


@dataclass
class ErrDocConfig:
    """Represents the settings defined in .errdoc.yml."""

    root: Path
    source_dir: Path
    pattern: str = DEFAULT_PATTERN
    namespace: Optional[str] = None
    root_base: str = DEFAULT_ROOT_BASE
    title: str = DEFAULT_TITLE
    toc: bool = False


def load_config(config_path: Path) -> ErrDocConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return ErrDocConfig(root=root, source_dir=root / DEFAULT_SOURCE_DIR)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping at the root")

    source_dir = _as_str(data.get("source_dir")) or DEFAULT_SOURCE_DIR
    namespace = _as_str(data.get("namespace"))

    return ErrDocConfig(
        root=root,
        source_dir=(root / source_dir).resolve(),
        pattern=_as_str(data.get("pattern")) or DEFAULT_PATTERN,
        namespace=namespace.strip(".") if namespace else None,
        root_base=_as_str(data.get("root_base")) or DEFAULT_ROOT_BASE,
        title=_as_str(data.get("title")) or DEFAULT_TITLE,
        toc=bool(_as_bool(data.get("toc"))),
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None
