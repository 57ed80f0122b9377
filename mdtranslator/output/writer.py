"""TranslationWriter: maps source documents into the output tree and writes them."""

from __future__ import annotations

import logging
import os
import re
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


def model_dir_name(model: str) -> str:
    """Make a model identifier safe for use as a single directory name.

    Anything other than word characters, ``.`` and ``-`` becomes ``_``, so ``gemini-2.0-flash``
    is kept verbatim while ``models/gemini-pro`` stays one path segment.
    """
    name = re.sub(r"[^\w.\-]", "_", model)
    if not name or name.strip(".") == "":
        name = "_unnamed"
    return name


class TranslationWriter:
    """Persists translated content under ``output_root/<model>/``.

    The relative layout of the source tree is mirrored below the model
    directory. Each write fully replaces the destination file via a
    temporary sibling and ``os.replace``, so readers never see a partial
    file.
    """

    def __init__(self, source_root: str | Path, output_root: str | Path, model: str) -> None:
        self.source_root = Path(source_root)
        self.output_root = Path(output_root)
        self.model = model
        self.output_dir = self.output_root / model_dir_name(model)

    def output_path_for(self, source: str | Path) -> Path:
        """Return where the translation of ``source`` belongs.

        Raises ValueError if ``source`` is not under the source root.
        """
        source = Path(source)
        try:
            rel = source.relative_to(self.source_root)
        except ValueError:
            # Mixed relative/absolute spellings of the same location
            try:
                rel = Path(os.path.abspath(source)).relative_to(
                    os.path.abspath(self.source_root)
                )
            except ValueError:
                raise ValueError(
                    f"{source} is not inside source root {self.source_root}"
                ) from None

        dest = self.output_dir / rel
        if not dest.resolve().is_relative_to(self.output_dir.resolve()):
            raise ValueError(f"Output path escapes output directory: {dest}")
        return dest

    def write(self, source: str | Path, content: str) -> Path:
        """Write ``content`` as the translation of ``source``. Returns the destination.

        OSError propagates to the caller; no partial file is left behind.
        """
        dest = self.output_path_for(source)
        dest.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(
            dir=dest.parent, prefix=f".{dest.name}.", suffix=".tmp"
        )
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(content)
                handle.flush()
                os.fsync(handle.fileno())
            # mkstemp creates 0600 files
            os.chmod(tmp_path, 0o644)
            os.replace(tmp_path, dest)
        finally:
            if tmp_path.exists():
                try:
                    tmp_path.unlink()
                except OSError:
                    logger.debug("Could not remove temp file %s", tmp_path)

        logger.debug("wrote %s (%d chars)", dest, len(content))
        return dest
