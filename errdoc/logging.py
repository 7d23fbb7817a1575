"""Logger hierarchy for errdoc.

Every module logs through ``get_logger(<component>)``, which returns a child
of the ``errdoc`` logger. ``configure_logging`` is called once by the CLI; it
writes to stderr because stdout carries the generated document.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

_ROOT = "errdoc"
_CONSOLE_FORMAT = "[errdoc] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(component: str | None = None) -> logging.Logger:
    return logging.getLogger(f"{_ROOT}.{component}" if component else _ROOT)


def resolve_level(*, verbose: bool = False, quiet: bool = False) -> int:
    """DEBUG for ``verbose``, WARNING for ``quiet`` (skipped classes only), else INFO."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_file: Path | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Attach console (and optional file) handlers to the ``errdoc`` logger.

    Existing handlers are replaced, so repeated CLI invocations in one process
    do not duplicate output. The log file always records DEBUG detail.
    """
    level = resolve_level(verbose=verbose, quiet=quiet)
    logger = logging.getLogger(_ROOT)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    console = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(file_handler)
        level = logging.DEBUG

    logger.setLevel(level)
    return logger


__all__ = ["configure_logging", "get_logger", "resolve_level"]
