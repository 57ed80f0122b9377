"""Pydantic models for translation results."""

from __future__ import annotations

from pydantic import BaseModel

from mdtranslator.llm.models import TokenUsage


class TranslationResult(BaseModel):
    """Outcome of one translation call.

    An empty ``content`` means the call failed; ``error`` then says why.
    """

    content: str = ""
    usage: TokenUsage | None = None
    model: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return bool(self.content)

    @classmethod
    def failed(cls, error: str) -> TranslationResult:
        return cls(content="", error=error)
