"""Google Gemini adapter for mdtranslator."""

from __future__ import annotations

from google import genai
from google.genai import types

from mdtranslator.llm.base import LLMProvider
from mdtranslator.llm.models import LLMConfig, LLMError, LLMResponse, TokenUsage


def _is_rate_limited(exc: Exception) -> bool:
    """Gemini signals quota exhaustion with HTTP 429 / RESOURCE_EXHAUSTED."""
    if getattr(exc, "code", None) == 429:
        return True
    text = str(exc)
    return "429" in text or "RESOURCE_EXHAUSTED" in text


class GeminiProvider(LLMProvider):
    """Gemini adapter using the google-genai async client."""

    def __init__(self, config: LLMConfig) -> None:
        super().__init__(config)
        self._client = genai.Client(api_key=config.api_key)

    async def generate(
        self,
        system: str,
        user: str,
        max_tokens: int | None = None,
    ) -> LLMResponse:
        try:
            response = await self._client.aio.models.generate_content(
                model=self.config.model,
                contents=user,
                config=types.GenerateContentConfig(
                    system_instruction=system,
                    max_output_tokens=self._max_tokens(max_tokens),
                    temperature=self.config.temperature,
                ),
            )
        except Exception as e:
            raise LLMError(
                "gemini", "generate", e, retryable=_is_rate_limited(e)
            ) from e

        if not response.text:
            raise ValueError("No text content in Gemini response")
        usage = response.usage_metadata
        return LLMResponse(
            content=response.text,
            usage=TokenUsage(
                input_tokens=(usage.prompt_token_count or 0) if usage else 0,
                output_tokens=(usage.candidates_token_count or 0) if usage else 0,
            ),
            model=self.config.model,
        )
