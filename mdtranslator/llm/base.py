"""Abstract LLM interface for mdtranslator."""

from __future__ import annotations

from abc import ABC, abstractmethod

from mdtranslator.llm.models import LLMConfig, LLMResponse


class LLMProvider(ABC):
    """Provider-agnostic interface for whole-document text generation.

    A translation is a single request/response exchange, so adapters only
    implement one-shot generation. Adapters raise LLMError on SDK failures;
    they do not retry beyond what the vendor SDK does on its own.
    """

    def __init__(self, config: LLMConfig) -> None:
        self.config = config

    @abstractmethod
    async def generate(
        self,
        system: str,
        user: str,
        max_tokens: int | None = None,
    ) -> LLMResponse:
        """Generate a complete response (one-shot)."""
        ...

    def _max_tokens(self, max_tokens: int | None) -> int:
        return max_tokens if max_tokens is not None else self.config.max_tokens
