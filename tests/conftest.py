from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from tests._fixtures.manifest_builder import ManifestBuilder


@pytest.fixture
def manifests(tmp_path: Path) -> ManifestBuilder:
    """Provide a manifest builder rooted at the pytest tmp_path."""
    return ManifestBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _reset_errdoc_logger() -> Iterator[None]:
    """Undo configure_logging so caplog sees records in every test."""
    yield
    logger = logging.getLogger("errdoc")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
