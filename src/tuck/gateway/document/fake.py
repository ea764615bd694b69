"""Fake DocumentEditor for testing."""

from collections.abc import Sequence
from pathlib import Path

from tuck.core.non_ideal_state import DocumentEditFailed
from tuck.gateway.document.abc import DocumentEditor
from tuck.gateway.document.text_edits import apply_text_edits, split_lines, strip_terminator
from tuck.gateway.document.types import DocumentEdited, TextEdit


class FakeDocumentEditor(DocumentEditor):
    """In-memory documents keyed by path.

    Constructor Injection: document texts and paths whose edits fail.
    Mutation Tracking: every successful apply_edits call is recorded.

    Example:
        >>> docs = FakeDocumentEditor(documents={Path("/repo/a.py"): "x = 1\\n"})
        >>> docs.apply_edits(Path("/repo/a.py"), [DeleteLine(line=0)])
        >>> assert docs.text(Path("/repo/a.py")) == ""
    """

    def __init__(
        self,
        *,
        documents: dict[Path, str] | None = None,
        failing_paths: set[Path] | None = None,
    ) -> None:
        self._documents = dict(documents) if documents is not None else {}
        self._failing_paths = failing_paths if failing_paths is not None else set()
        self._applied: list[tuple[Path, tuple[TextEdit, ...]]] = []

    def read_lines(self, path: Path) -> tuple[str, ...] | DocumentEditFailed:
        if path not in self._documents:
            return DocumentEditFailed(path=str(path), message=f"File not found: {path}")
        return tuple(strip_terminator(line) for line in split_lines(self._documents[path]))

    def apply_edits(
        self, path: Path, edits: Sequence[TextEdit]
    ) -> DocumentEdited | DocumentEditFailed:
        if path not in self._documents:
            return DocumentEditFailed(path=str(path), message=f"File not found: {path}")
        if path in self._failing_paths:
            return DocumentEditFailed(path=str(path), message=f"Failed to write {path}: read-only")

        new_text, error = apply_text_edits(self._documents[path], edits)
        if new_text is None:
            assert error is not None
            return DocumentEditFailed(path=str(path), message=error)

        self._documents[path] = new_text
        self._applied.append((path, tuple(edits)))
        return DocumentEdited(path=str(path), line_count=len(split_lines(new_text)))

    def text(self, path: Path) -> str:
        """Current text of a document."""
        return self._documents[path]

    @property
    def applied_edits(self) -> list[tuple[Path, tuple[TextEdit, ...]]]:
        """Read-only access to (path, edits) for each successful apply."""
        return list(self._applied)
