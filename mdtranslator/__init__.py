"""mdtranslator - translate Markdown trees with an LLM, skipping files already done."""

from mdtranslator.config import TranslatorConfig, load_config
from mdtranslator.llm import LLMProvider, create_llm_provider
from mdtranslator.output import TranslationWriter
from mdtranslator.pipeline import BatchOrchestrator, BatchSummary, SourceRootError
from mdtranslator.translator import MarkdownTranslator

__version__ = "0.1.0"

__all__ = [
    "BatchOrchestrator",
    "BatchSummary",
    "LLMProvider",
    "MarkdownTranslator",
    "SourceRootError",
    "TranslationWriter",
    "TranslatorConfig",
    "create_llm_provider",
    "load_config",
]
