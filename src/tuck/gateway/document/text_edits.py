"""Pure application of line edits to document text.

Line terminators of untouched lines are preserved. Inserted lines use the
document's first terminator style, or "\\n" when it has none.
"""

import re
from collections.abc import Sequence

from tuck.gateway.document.types import DeleteLine, DeleteSpan, InsertLine, TextEdit

# A line is its text plus one of "\r\n", "\r" or "\n"; the last line may lack
# a terminator. Other characters str.splitlines treats as breaks stay in the text.
_LINE = re.compile(r"[^\r\n]*(?:\r\n|\r|\n)|[^\r\n]+")


def split_lines(text: str) -> list[str]:
    """Split text into lines, keeping terminators."""
    return _LINE.findall(text)


def strip_terminator(line: str) -> str:
    return line.rstrip("\r\n")


def detect_newline(lines: Sequence[str]) -> str:
    for line in lines:
        if line.endswith("\r\n"):
            return "\r\n"
        if line.endswith("\n"):
            return "\n"
        if line.endswith("\r"):
            return "\r"
    return "\n"


def apply_text_edits(text: str, edits: Sequence[TextEdit]) -> tuple[str | None, str | None]:
    """Apply edits to text.

    Returns:
        tuple[str | None, str | None]: (new_text, error_message)
        - If every edit applied: (text, None)
        - If an edit is out of range: (None, error_message)
    """
    lines = split_lines(text)
    newline = detect_newline(lines)

    for edit in edits:
        match edit:
            case DeleteLine(line=line):
                if line < 0 or line >= len(lines):
                    return (None, f"Line {line + 1} is out of range (document has {len(lines)})")
                del lines[line]
            case DeleteSpan(line=line, start=start, end=end):
                if line < 0 or line >= len(lines):
                    return (None, f"Line {line + 1} is out of range (document has {len(lines)})")
                content = strip_terminator(lines[line])
                terminator = lines[line][len(content) :]
                if start < 0 or end < start or end > len(content):
                    return (None, f"Span {start}-{end} is out of range on line {line + 1}")
                lines[line] = content[:start] + content[end:] + terminator
            case InsertLine(line=line, text=new_text):
                if line < 0 or line > len(lines):
                    return (None, f"Line {line + 1} is out of range (document has {len(lines)})")
                if line == len(lines) and lines and strip_terminator(lines[-1]) == lines[-1]:
                    lines[-1] = lines[-1] + newline
                lines.insert(line, new_text + newline)

    return ("".join(lines), None)
