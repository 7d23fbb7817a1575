"""Tests for errdoc.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from errdoc.config import ErrDocConfig, load_config
from errdoc.errors import ConfigError


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, ErrDocConfig)
    assert config.root == tmp_path.resolve()
    assert config.source_dir == tmp_path.resolve() / "exceptions"
    assert config.pattern == "*.yml"
    assert config.namespace is None
    assert config.root_base == "Exception"
    assert config.title == "Exception Reference"
    assert config.toc is False


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".errdoc.yml"
    config_file.write_text(
        """
source_dir: "lib/errors"
pattern: "*.yaml"
namespace: "app.errors."
root_base: app.errors.Base
title: App Errors
toc: yes
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.source_dir == (tmp_path / "lib" / "errors").resolve()
    assert config.pattern == "*.yaml"
    assert config.namespace == "app.errors"
    assert config.root_base == "app.errors.Base"
    assert config.title == "App Errors"
    assert config.toc is True


def test_load_config_accepts_empty_file(tmp_path: Path) -> None:
    (tmp_path / ".errdoc.yml").write_text("\n", encoding="utf-8")
    assert load_config(tmp_path).root_base == "Exception"


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    (tmp_path / ".errdoc.yml").write_text("- one\n- two\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="mapping at the root"):
        load_config(tmp_path)


def test_load_config_rejects_invalid_yaml(tmp_path: Path) -> None:
    (tmp_path / ".errdoc.yml").write_text("title: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Failed to parse"):
        load_config(tmp_path)
