"""Pydantic models for batch outcomes."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class SourceRootError(Exception):
    """The configured source root is missing or unreadable; nothing was processed."""

    def __init__(self, source_dir: str, reason: str) -> None:
        self.source_dir = source_dir
        self.reason = reason
        super().__init__(f"Source directory '{source_dir}' {reason}")


class ItemStatus(str, Enum):
    SKIPPED = "skipped"
    SAVED = "saved"
    FAILED = "failed"


class ItemOutcome(BaseModel):
    """Terminal state of one document in a batch."""

    source: str
    status: ItemStatus
    output_path: str | None = None
    reason: str | None = None


class BatchSummary(BaseModel):
    """Counters for a finished run, plus the per-item outcomes in processing order."""

    total_discovered: int = 0
    translated_count: int = 0
    skipped_count: int = 0
    failed_count: int = 0
    outcomes: list[ItemOutcome] = Field(default_factory=list)
    duration: float = 0.0

    def record(self, outcome: ItemOutcome) -> None:
        self.outcomes.append(outcome)
        if outcome.status is ItemStatus.SAVED:
            self.translated_count += 1
        elif outcome.status is ItemStatus.SKIPPED:
            self.skipped_count += 1
        else:
            self.failed_count += 1

    @property
    def failures(self) -> list[ItemOutcome]:
        return [o for o in self.outcomes if o.status is ItemStatus.FAILED]
