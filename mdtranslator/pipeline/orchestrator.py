"""BatchOrchestrator: drives scan, staleness check, translation and write per document."""

from __future__ import annotations

import asyncio
import logging
import os
import time
from collections.abc import Awaitable, Callable
from pathlib import Path

from mdtranslator.config.models import BatchSettings
from mdtranslator.freshness.checker import PendingEntry, check_pending, is_translation_current
from mdtranslator.output.writer import TranslationWriter
from mdtranslator.pipeline.models import BatchSummary, ItemOutcome, ItemStatus, SourceRootError
from mdtranslator.scanner.models import SourceDocument
from mdtranslator.scanner.tree import scan_documents
from mdtranslator.translator.client import MarkdownTranslator

logger = logging.getLogger(__name__)


def check_source_root(source_dir: str | Path) -> None:
    """Raise SourceRootError unless ``source_dir`` is a readable directory."""
    root = Path(source_dir)
    if not root.exists():
        raise SourceRootError(str(source_dir), "does not exist")
    if not root.is_dir():
        raise SourceRootError(str(source_dir), "is not a directory")
    if not os.access(root, os.R_OK | os.X_OK):
        raise SourceRootError(str(source_dir), "is not accessible")


def plan_batch(settings: BatchSettings, model: str) -> list[PendingEntry]:
    """Report which documents a run would translate, without translating or writing.

    In force mode every entry is reported as not current.
    """
    check_source_root(settings.source_dir)
    writer = TranslationWriter(settings.source_dir, settings.output_dir, model)
    docs = scan_documents(settings.source_dir, settings.extensions)
    entries = check_pending(docs, writer)
    if settings.force:
        entries = [e.model_copy(update={"current": False}) for e in entries]
    return entries


class BatchOrchestrator:
    """Translates every stale document under the source root, one at a time.

    Items move through ``Discovered -> CheckStale -> {Skipped | Translating}
    -> {Saved | Failed}``. Force mode skips the staleness check. Any error
    inside an item ends that item as Failed and the batch moves on; only a
    missing or unreadable source root aborts the run (SourceRootError).
    A pacing delay separates consecutive items.
    """

    def __init__(
        self,
        settings: BatchSettings,
        model: str,
        translator: MarkdownTranslator,
        *,
        writer: TranslationWriter | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        on_outcome: Callable[[ItemOutcome], None] | None = None,
    ) -> None:
        self.settings = settings
        self.model = model
        self.translator = translator
        self.writer = writer or TranslationWriter(
            settings.source_dir, settings.output_dir, model
        )
        self._sleep = sleep
        self._on_outcome = on_outcome

    # -- Public API ----------------------------------------------------------

    async def run(self) -> BatchSummary:
        """Process the whole batch and return its summary.

        Raises SourceRootError before touching the translation service or
        the output tree if the source root is unusable.
        """
        check_source_root(self.settings.source_dir)
        start = time.monotonic()

        logger.info("Searching for Markdown files in %s", self.settings.source_dir)
        docs = scan_documents(self.settings.source_dir, self.settings.extensions)
        summary = BatchSummary(total_discovered=len(docs))

        if not docs:
            logger.info("No Markdown files found.")
            summary.duration = time.monotonic() - start
            return summary

        logger.info("Found %d Markdown file(s).", len(docs))
        logger.info("Model: %s", self.model)
        logger.info("Output directory: %s", self.writer.output_dir)
        if self.settings.force:
            logger.warning("Force mode enabled: existing translations will be overwritten.")

        for index, doc in enumerate(docs):
            outcome = await self.process(doc)
            summary.record(outcome)
            if self._on_outcome is not None:
                self._on_outcome(outcome)
            if index < len(docs) - 1:
                await self._pace()

        summary.duration = time.monotonic() - start
        logger.info(
            "Done: %d total, %d translated, %d skipped, %d failed",
            summary.total_discovered,
            summary.translated_count,
            summary.skipped_count,
            summary.failed_count,
        )
        return summary

    async def process(self, doc: SourceDocument) -> ItemOutcome:
        """Run one document to a terminal state. Never raises for per-item errors."""
        source = str(doc.path)
        logger.info("Processing: %s", source)

        try:
            output_path = self.writer.output_path_for(doc.path)
        except ValueError as exc:
            return self._failed(source, str(exc))

        if not self.settings.force and is_translation_current(
            doc.path, output_path, doc.mtime
        ):
            logger.info("Skipped (already translated): %s", source)
            return ItemOutcome(
                source=source,
                status=ItemStatus.SKIPPED,
                output_path=str(output_path),
            )

        try:
            content = doc.read_text()
        except (OSError, UnicodeDecodeError) as exc:
            return self._failed(source, f"read error: {exc}")
        if not content:
            return self._failed(source, "empty or unreadable content")

        result = await self.translator.translate(content)
        if not result.ok:
            return self._failed(source, f"translation failed: {result.error or 'empty result'}")

        try:
            written = self.writer.write(doc.path, result.content)
        except (OSError, ValueError) as exc:
            return self._failed(source, f"save error: {exc}")

        logger.info("Translated and saved: %s", written)
        return ItemOutcome(
            source=source,
            status=ItemStatus.SAVED,
            output_path=str(written),
        )

    # -- Internals -----------------------------------------------------------

    async def _pace(self) -> None:
        if self.settings.delay_seconds > 0:
            await self._sleep(self.settings.delay_seconds)

    @staticmethod
    def _failed(source: str, reason: str) -> ItemOutcome:
        logger.error("Failed: %s (%s)", source, reason)
        return ItemOutcome(source=source, status=ItemStatus.FAILED, reason=reason)
