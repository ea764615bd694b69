"""File-backed implementation of DocumentEditor."""

import logging
from collections.abc import Sequence
from pathlib import Path

from tuck.core.non_ideal_state import DocumentEditFailed
from tuck.gateway.document.abc import DocumentEditor
from tuck.gateway.document.text_edits import apply_text_edits, split_lines, strip_terminator
from tuck.gateway.document.types import DocumentEdited, TextEdit

logger = logging.getLogger(__name__)


class FileDocumentEditor(DocumentEditor):
    """Production implementation - reads and rewrites files on disk.

    Files are read and written as UTF-8 with newline translation disabled,
    so untouched line terminators survive byte-for-byte.
    """

    def read_lines(self, path: Path) -> tuple[str, ...] | DocumentEditFailed:
        text = self._read_text(path)
        if isinstance(text, DocumentEditFailed):
            return text
        return tuple(strip_terminator(line) for line in split_lines(text))

    def apply_edits(
        self, path: Path, edits: Sequence[TextEdit]
    ) -> DocumentEdited | DocumentEditFailed:
        text = self._read_text(path)
        if isinstance(text, DocumentEditFailed):
            return text

        new_text, error = apply_text_edits(text, edits)
        if new_text is None:
            assert error is not None
            return DocumentEditFailed(path=str(path), message=error)

        try:
            with path.open("w", encoding="utf-8", newline="") as f:
                f.write(new_text)
        except OSError as e:
            return DocumentEditFailed(path=str(path), message=f"Failed to write {path}: {e}")

        logger.debug("Applied %d edit(s) to %s", len(edits), path)
        return DocumentEdited(path=str(path), line_count=len(split_lines(new_text)))

    def _read_text(self, path: Path) -> str | DocumentEditFailed:
        if not path.is_file():
            return DocumentEditFailed(path=str(path), message=f"File not found: {path}")
        try:
            with path.open(encoding="utf-8", newline="") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            return DocumentEditFailed(path=str(path), message=f"Failed to read {path}: {e}")
