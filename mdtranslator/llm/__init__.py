"""LLM provider abstraction layer."""

import os

from mdtranslator.config.models import LLMSettings
from mdtranslator.llm.base import LLMProvider
from mdtranslator.llm.claude import ClaudeProvider
from mdtranslator.llm.gemini import GeminiProvider
from mdtranslator.llm.models import LLMConfig, LLMError, LLMResponse, TokenUsage
from mdtranslator.llm.ollama import OllamaProvider
from mdtranslator.llm.openai_adapter import OpenAIProvider

_PROVIDER_MAP: dict[str, type[LLMProvider]] = {
    "anthropic": ClaudeProvider,
    "openai": OpenAIProvider,
    "google": GeminiProvider,
    "ollama": OllamaProvider,
}


def create_llm_provider(settings: LLMSettings) -> LLMProvider:
    """Create an LLM provider from app-level settings.

    Resolves the API key from the env var in settings.api_key_env, then
    bridges LLMSettings to the provider-level LLMConfig. For the "auto"
    provider, delegates to auto_detect_provider().
    """
    if settings.provider == "auto":
        from mdtranslator.llm.auto_detect import auto_detect_provider

        return auto_detect_provider(
            model=settings.model,
            max_tokens=settings.max_tokens,
            temperature=settings.temperature,
            base_url=settings.base_url,
        )

    cls = _PROVIDER_MAP.get(settings.provider)
    if cls is None:
        raise ValueError(
            f"Unsupported LLM provider: {settings.provider!r}. "
            f"Supported: {', '.join(_PROVIDER_MAP)}"
        )

    api_key = None
    # Ollama runs locally without a key
    if settings.provider != "ollama":
        api_key = os.environ.get(settings.api_key_env)
        if not api_key:
            raise ValueError(
                f"Missing API key: set environment variable {settings.api_key_env!r}"
            )

    llm_config = LLMConfig(
        provider=settings.provider,
        model=settings.model,
        max_tokens=settings.max_tokens,
        temperature=settings.temperature,
        api_key=api_key,
        base_url=settings.base_url,
    )
    return cls(llm_config)


__all__ = [
    "ClaudeProvider",
    "GeminiProvider",
    "LLMConfig",
    "LLMError",
    "LLMProvider",
    "LLMResponse",
    "OllamaProvider",
    "OpenAIProvider",
    "TokenUsage",
    "create_llm_provider",
]
