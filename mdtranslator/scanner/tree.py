"""Recursive discovery of Markdown documents under a source root."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from mdtranslator.scanner.models import SourceDocument

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS: tuple[str, ...] = (".md", ".markdown")


def find_documents(
    root: str | Path,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
) -> list[Path]:
    """Return every file under ``root`` whose name ends with one of ``extensions``.

    Entries are visited in name order so results are deterministic. A
    directory that cannot be read (missing, permission denied, removed
    mid-walk) is logged and contributes nothing; the walk carries on with
    its siblings. Symlinked directories are followed once.
    """
    suffixes = tuple(extensions)
    found: list[Path] = []
    _walk(Path(root), suffixes, found, visited=set())
    return found


def scan_documents(
    root: str | Path,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
) -> list[SourceDocument]:
    """Like find_documents(), but stat each hit into a SourceDocument.

    Files that vanish between listing and stat are dropped with a warning.
    """
    docs: list[SourceDocument] = []
    for path in find_documents(root, extensions):
        try:
            docs.append(SourceDocument.from_path(path))
        except OSError as exc:
            logger.warning("Cannot stat %s: %s", path, exc)
    return docs


def _walk(
    directory: Path,
    suffixes: tuple[str, ...],
    found: list[Path],
    visited: set[Path],
) -> None:
    try:
        real = directory.resolve()
        if real in visited:
            logger.debug("Already visited %s, skipping", directory)
            return
        visited.add(real)
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as exc:
        logger.warning("Error reading directory %s: %s", directory, exc)
        return

    for entry in entries:
        path = directory / entry.name
        try:
            is_dir = entry.is_dir()
        except OSError as exc:
            logger.warning("Cannot stat %s: %s", path, exc)
            continue
        if is_dir:
            _walk(path, suffixes, found, visited)
        elif entry.name.endswith(suffixes):
            found.append(path)
