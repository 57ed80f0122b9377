"""Pick a provider from whatever credentials or local services are present."""

from __future__ import annotations

import logging
import os

import httpx

from mdtranslator.llm.base import LLMProvider
from mdtranslator.llm.models import LLMConfig

logger = logging.getLogger(__name__)

DEFAULT_MODELS = {
    "anthropic": "claude-haiku-4-5-20251001",
    "openai": "gpt-4o",
    "google": "gemini-2.0-flash",
    "ollama": "llama3",
}

# Checked in order; the first variable that is set wins.
_KEY_VARS: list[tuple[str, tuple[str, ...]]] = [
    ("anthropic", ("ANTHROPIC_API_KEY",)),
    ("openai", ("OPENAI_API_KEY",)),
    ("google", ("GOOGLE_API_KEY", "GEMINI_API_KEY")),
]

_OLLAMA_TAGS_URL = "http://localhost:11434/api/tags"


def _provider_class(name: str) -> type[LLMProvider]:
    # Imported lazily so only the chosen SDK is loaded
    if name == "anthropic":
        from mdtranslator.llm.claude import ClaudeProvider
        return ClaudeProvider
    if name == "openai":
        from mdtranslator.llm.openai_adapter import OpenAIProvider
        return OpenAIProvider
    if name == "google":
        from mdtranslator.llm.gemini import GeminiProvider
        return GeminiProvider
    from mdtranslator.llm.ollama import OllamaProvider
    return OllamaProvider


def _first_ollama_model(base_url: str | None = None) -> str | None:
    """Name of the first model an Ollama server reports, or None if none answers."""
    url = f"{base_url.rstrip('/')}/api/tags" if base_url else _OLLAMA_TAGS_URL
    try:
        resp = httpx.get(url, timeout=2.0)
        resp.raise_for_status()
    except httpx.HTTPError as exc:
        logger.debug("No Ollama server at %s: %s", url, exc)
        return None
    models = resp.json().get("models", [])
    return models[0]["name"] if models else None


def auto_detect_provider(
    model: str | None = None,
    max_tokens: int = 8192,
    temperature: float = 0.3,
    base_url: str | None = None,
) -> LLMProvider:
    """Return the first available provider.

    Order: Anthropic > OpenAI > Google Gemini > Ollama (local). ``model``
    overrides the per-provider default; ``base_url`` is handed to
    OpenAI-compatible and Ollama endpoints and also locates the Ollama
    server to query. Raises ValueError if nothing is available.
    """
    for name, env_vars in _KEY_VARS:
        api_key = next((os.environ[v] for v in env_vars if os.environ.get(v)), None)
        if api_key:
            logger.debug("Auto-detected %s from environment", name)
            config = LLMConfig(
                provider=name,
                model=model or DEFAULT_MODELS[name],
                max_tokens=max_tokens,
                temperature=temperature,
                api_key=api_key,
                base_url=base_url if name == "openai" else None,
            )
            return _provider_class(name)(config)

    local_model = _first_ollama_model(base_url)
    if local_model:
        logger.debug("Auto-detected local Ollama with model %s", local_model)
        config = LLMConfig(
            provider="ollama",
            model=model or local_model,
            max_tokens=max_tokens,
            temperature=temperature,
            base_url=base_url,
        )
        return _provider_class("ollama")(config)

    raise ValueError(
        "No LLM provider found. Set llm.provider in mdtranslator.yaml or export an "
        "API key (ANTHROPIC_API_KEY, OPENAI_API_KEY, GEMINI_API_KEY) or start Ollama."
    )
