"""MarkdownTranslator: one LLM call per document, never raises."""

from __future__ import annotations

import logging

from mdtranslator.config.models import TranslationSettings
from mdtranslator.llm.base import LLMProvider
from mdtranslator.translator.models import TranslationResult
from mdtranslator.translator.prompts import build_system_prompt

logger = logging.getLogger(__name__)


def _strip_wrapping_fence(text: str, source: str) -> str:
    """Remove a code fence the model wrapped around the whole answer.

    Left alone when the source document itself opens with a fence.
    """
    stripped = text.strip()
    if source.lstrip().startswith("```"):
        return text
    if not stripped.startswith("```") or not stripped.endswith("```"):
        return text
    lines = stripped.split("\n")
    if len(lines) < 3:
        return text
    return "\n".join(lines[1:-1]) + "\n"


class MarkdownTranslator:
    """Adapter between the batch pipeline and an LLM provider.

    ``translate()`` issues exactly one request and converts every failure
    (transport error, rate-limit rejection, empty or malformed response)
    into an empty TranslationResult, so a single bad document cannot stop
    a batch.
    """

    def __init__(
        self,
        provider: LLMProvider,
        settings: TranslationSettings | None = None,
    ) -> None:
        self.provider = provider
        self.settings = settings or TranslationSettings()
        self._system = build_system_prompt(
            self.settings.source_language,
            self.settings.target_language,
        )

    async def translate(self, text: str) -> TranslationResult:
        try:
            response = await self.provider.generate(self._system, text)
        except Exception as exc:
            logger.error("Translation error: %s", exc)
            return TranslationResult.failed(str(exc))

        content = _strip_wrapping_fence(response.content, text)
        if not content.strip():
            logger.error("Translation error: empty response from %s", response.model)
            return TranslationResult.failed("empty response")

        return TranslationResult(
            content=content,
            usage=response.usage,
            model=response.model,
        )
