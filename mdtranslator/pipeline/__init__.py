"""Batch translation pipeline."""

from mdtranslator.pipeline.models import (
    BatchSummary,
    ItemOutcome,
    ItemStatus,
    SourceRootError,
)
from mdtranslator.pipeline.orchestrator import (
    BatchOrchestrator,
    check_source_root,
    plan_batch,
)

__all__ = [
    "BatchOrchestrator",
    "BatchSummary",
    "ItemOutcome",
    "ItemStatus",
    "SourceRootError",
    "check_source_root",
    "plan_batch",
]
