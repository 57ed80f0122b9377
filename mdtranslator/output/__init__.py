"""Output subsystem: writes translated documents into the mirrored tree."""

from mdtranslator.output.writer import TranslationWriter, model_dir_name

__all__ = [
    "TranslationWriter",
    "model_dir_name",
]
