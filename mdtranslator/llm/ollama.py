"""Ollama adapter for mdtranslator."""

from __future__ import annotations

import logging
from urllib.parse import urlparse

import httpx

from mdtranslator.llm.base import LLMProvider
from mdtranslator.llm.models import LLMConfig, LLMError, LLMResponse, TokenUsage

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:11434"

_LOCAL_HOSTS = frozenset({"localhost", "127.0.0.1", "::1", "0.0.0.0"})

# Local models are slow on whole documents.
_REQUEST_TIMEOUT = 300.0


def _checked_base_url(raw: str | None) -> str:
    """Normalize the configured server URL, rejecting anything but plain http(s)."""
    url = (raw or DEFAULT_BASE_URL).rstrip("/")
    if any(c in url for c in "\r\n"):
        raise ValueError("Ollama base_url must not contain line breaks")
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https"):
        raise ValueError(f"Ollama base_url must be http(s), got {parsed.scheme!r}")
    if parsed.hostname not in _LOCAL_HOSTS:
        logger.warning("Sending documents to remote Ollama host %s", parsed.hostname)
    return url


class OllamaProvider(LLMProvider):
    """Ollama adapter using its REST API via httpx."""

    def __init__(self, config: LLMConfig) -> None:
        super().__init__(config)
        self._base_url = _checked_base_url(config.base_url)

    async def generate(
        self,
        system: str,
        user: str,
        max_tokens: int | None = None,
    ) -> LLMResponse:
        payload = {
            "model": self.config.model,
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
            "stream": False,
            "options": {
                "num_predict": self._max_tokens(max_tokens),
                "temperature": self.config.temperature,
            },
        }
        try:
            async with httpx.AsyncClient() as client:
                resp = await client.post(
                    f"{self._base_url}/api/chat",
                    json=payload,
                    timeout=_REQUEST_TIMEOUT,
                )
                resp.raise_for_status()
                data = resp.json()
        except httpx.HTTPError as e:
            retryable = (
                isinstance(e, httpx.HTTPStatusError) and e.response.status_code == 429
            )
            raise LLMError("ollama", "generate", e, retryable=retryable) from e

        content = data.get("message", {}).get("content", "")
        if not content:
            raise ValueError("No content in Ollama response")
        return LLMResponse(
            content=content,
            usage=TokenUsage(
                input_tokens=data.get("prompt_eval_count", 0),
                output_tokens=data.get("eval_count", 0),
            ),
            model=self.config.model,
        )
