"""File discovery — recursive walk for source files of the analyzed language."""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

JAVA_SUFFIX = ".java"


def discover_source_files(root: Path, suffix: str = JAVA_SUFFIX) -> list[Path]:
    """Return every regular file under ``root`` whose name ends with ``suffix``.

    Entries come back in the filesystem's own enumeration order.  A directory
    that cannot be listed contributes nothing and the walk goes on.
    """
    found: list[Path] = []
    _walk(Path(root), suffix, found)
    return found


def _walk(directory: Path, suffix: str, found: list[Path]) -> None:
    try:
        with os.scandir(directory) as it:
            entries = list(it)
    except OSError:
        logger.debug("Cannot list %s — skipping", directory, exc_info=True)
        return

    for entry in entries:
        if entry.is_dir():
            _walk(Path(entry.path), suffix, found)
        elif entry.is_file() and entry.name.endswith(suffix):
            found.append(Path(entry.path))
