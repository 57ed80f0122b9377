"""Staleness detection for source/translation pairs via modification times.

A translation is current when its output file exists and is at least as new
as the source. Content changes that leave the source mtime untouched go
unnoticed, and filesystems with coarse or mismatched mtime resolution can
misjudge freshness. There is no manifest or hash store; the output tree is
the only state.
"""

from __future__ import annotations

import logging
import stat
from collections.abc import Iterable
from pathlib import Path

from pydantic import BaseModel

from mdtranslator.output.writer import TranslationWriter
from mdtranslator.scanner.models import SourceDocument

logger = logging.getLogger(__name__)


class PendingEntry(BaseModel):
    """Freshness status of one source document."""

    source_path: str
    output_path: str
    current: bool


def is_translation_current(
    source_path: str | Path,
    output_path: str | Path,
    source_mtime: float | None = None,
) -> bool:
    """Return True when ``output_path`` holds an up-to-date translation.

    ``source_mtime`` is the mtime recorded at scan time; when omitted the
    source is stat'ed here.

    Any stat failure answers False so the document gets translated again
    rather than silently skipped.
    """
    try:
        out_stat = Path(output_path).stat()
    except OSError:
        return False
    if not stat.S_ISREG(out_stat.st_mode):
        return False

    if source_mtime is None:
        try:
            source_mtime = Path(source_path).stat().st_mtime
        except OSError as exc:
            logger.debug("Cannot stat source %s: %s", source_path, exc)
            return False

    return out_stat.st_mtime >= source_mtime


def check_pending(
    documents: Iterable[SourceDocument],
    writer: TranslationWriter,
) -> list[PendingEntry]:
    """Report, for each document, where its translation lives and whether it is current."""
    entries: list[PendingEntry] = []
    for doc in documents:
        try:
            out = writer.output_path_for(doc.path)
        except ValueError as exc:
            logger.warning("Skipping %s: %s", doc.path, exc)
            continue
        entries.append(PendingEntry(
            source_path=str(doc.path),
            output_path=str(out),
            current=is_translation_current(doc.path, out, doc.mtime),
        ))
    return entries
