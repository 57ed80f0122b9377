"""Source tree scanning."""

from mdtranslator.scanner.models import SourceDocument
from mdtranslator.scanner.tree import DEFAULT_EXTENSIONS, find_documents, scan_documents

__all__ = [
    "DEFAULT_EXTENSIONS",
    "SourceDocument",
    "find_documents",
    "scan_documents",
]
