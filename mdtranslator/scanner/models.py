"""Data types produced by the tree scanner."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SourceDocument:
    """A discovered document. Content is read on demand, not at scan time."""

    path: Path
    mtime: float

    @classmethod
    def from_path(cls, path: Path) -> SourceDocument:
        return cls(path=path, mtime=path.stat().st_mtime)

    def read_text(self) -> str:
        return self.path.read_text(encoding="utf-8")
