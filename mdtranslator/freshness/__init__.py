"""Freshness tracking: decides whether a translation can be skipped."""

from mdtranslator.freshness.checker import (
    PendingEntry,
    check_pending,
    is_translation_current,
)

__all__ = [
    "PendingEntry",
    "check_pending",
    "is_translation_current",
]
