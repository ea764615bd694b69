"""Abstract interface for reading and editing source documents."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path

from tuck.core.non_ideal_state import DocumentEditFailed
from tuck.gateway.document.types import DocumentEdited, TextEdit

PYTHON_SUFFIXES = frozenset({".py", ".pyi", ".pyw"})


class DocumentEditor(ABC):
    """Abstract access to the documents TODOs live in.

    Implementations:
    - FileDocumentEditor: Production - files on disk
    - FakeDocumentEditor: Testing - in-memory line lists
    """

    @abstractmethod
    def read_lines(self, path: Path) -> tuple[str, ...] | DocumentEditFailed:
        """Read a document as lines without terminators.

        Args:
            path: Document path

        Returns:
            The lines, or DocumentEditFailed if the document cannot be read
        """
        ...

    @abstractmethod
    def apply_edits(
        self, path: Path, edits: Sequence[TextEdit]
    ) -> DocumentEdited | DocumentEditFailed:
        """Apply edits in order and persist the document.

        Either every edit is applied or the document is left untouched.

        Args:
            path: Document path
            edits: Edits to apply

        Returns:
            DocumentEdited, or DocumentEditFailed
        """
        ...

    def language_id(self, path: Path) -> str:
        """Identify the document language from its file name."""
        if path.suffix.lower() in PYTHON_SUFFIXES:
            return "python"
        if path.suffix:
            return path.suffix[1:].lower()
        return "plaintext"
