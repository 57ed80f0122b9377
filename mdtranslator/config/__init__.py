from .loader import load_config
from .models import (
    BatchSettings,
    LLMSettings,
    TranslationSettings,
    TranslatorConfig,
)

__all__ = [
    "BatchSettings",
    "LLMSettings",
    "TranslationSettings",
    "TranslatorConfig",
    "load_config",
]
