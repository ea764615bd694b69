"""Line-level edit operations on a source document.

All line indices are zero-based. A sequence of edits is applied in order,
each against the result of the previous one.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DeleteLine:
    """Delete a whole line including its terminator."""

    line: int


@dataclass(frozen=True)
class DeleteSpan:
    """Delete characters [start, end) within one line."""

    line: int
    start: int
    end: int


@dataclass(frozen=True)
class InsertLine:
    """Insert a new line so that it becomes line `line`."""

    line: int
    text: str


TextEdit = DeleteLine | DeleteSpan | InsertLine


@dataclass(frozen=True)
class DocumentEdited:
    """Success result from applying edits."""

    path: str
    line_count: int
