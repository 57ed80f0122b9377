"""Translation client built on the LLM provider layer."""

from mdtranslator.translator.client import MarkdownTranslator
from mdtranslator.translator.models import TranslationResult

__all__ = [
    "MarkdownTranslator",
    "TranslationResult",
]
