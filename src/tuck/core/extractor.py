"""TODO comment extraction from a single line of source text.

Recognizes `//` and `#` line comments followed by a case-insensitive `TODO`
token, an optional `:` or `-`, and free text. Several annotations may share
one physical line; each message runs until the next `prefix TODO`
occurrence or the end of the line.

All functions here are pure.
"""

import re
from collections.abc import Sequence

from tuck.core.types import TodoAnnotation

# One annotation per match; the lazy message stops at the next prefix+TODO.
_TODO_SCAN = re.compile(
    r"(//|#)\s*TODO[:\-]?\s*(.*?)(?=(?://|#)\s*TODO[:\-]?|$)",
    re.IGNORECASE,
)

# Applied to the trimmed line: "starts with comment+TODO".
_TODO_LEADING = re.compile(r"^(//|#)\s*TODO[:\-]?\s*", re.IGNORECASE)

# From the first comment+TODO to the end of the line.
_TODO_TAIL = re.compile(r"(//|#)\s*TODO[:\-]?.*$", re.IGNORECASE)

_INDENT = re.compile(r"^\s*")

PYTHON_LANGUAGE_ID = "python"


def extract_todos(line_text: str) -> tuple[TodoAnnotation, ...]:
    """Extract every TODO annotation from one line.

    Falls back to a single whole-line annotation (offset None) when the
    left-to-right scan yields nothing but the line starts with a TODO
    comment. Annotations whose message is empty after trimming are dropped.

    Args:
        line_text: One line of source text, without its terminator

    Returns:
        Annotations in left-to-right order, possibly empty
    """
    annotations = []
    for match in _TODO_SCAN.finditer(line_text):
        message = match.group(2).strip()
        if message:
            annotations.append(TodoAnnotation(message=message, offset=match.start()))

    if annotations:
        return tuple(annotations)

    fallback = extract_single_todo(line_text)
    if fallback is None:
        return ()
    return (fallback,)


def extract_single_todo(line_text: str) -> TodoAnnotation | None:
    """Extract one annotation covering all text after a leading TODO comment.

    Returns:
        The annotation with offset None, or None if the trimmed line does not
        start with a TODO comment or its message is empty
    """
    trimmed = line_text.strip()
    if _TODO_LEADING.match(trimmed) is None:
        return None
    message = _TODO_LEADING.sub("", trimmed, count=1).strip()
    if not message:
        return None
    return TodoAnnotation(message=message, offset=None)


def has_todo_comment(line_text: str) -> bool:
    """Check whether the trimmed line starts with a TODO comment."""
    return _TODO_LEADING.match(line_text.strip()) is not None


def find_todo_comments(lines: Sequence[str]) -> tuple[int, ...]:
    """Return the zero-based indices of lines that start with a TODO comment."""
    return tuple(index for index, text in enumerate(lines) if has_todo_comment(text))


def comment_start(line_text: str) -> int | None:
    """Offset where the first TODO comment on the line begins, or None."""
    match = _TODO_TAIL.search(line_text)
    if match is None:
        return None
    return match.start()


def leading_indent(line_text: str) -> str:
    match = _INDENT.match(line_text)
    assert match is not None
    return match.group(0)


def comment_prefix_for(language_id: str) -> str:
    """Line comment prefix for a document language: `#` for Python, else `//`."""
    if language_id == PYTHON_LANGUAGE_ID:
        return "#"
    return "//"


def format_todo_comment(indent: str, prefix: str, message: str) -> str:
    """Build `<indent><prefix> TODO: <message>`."""
    return f"{indent}{prefix} TODO: {message}"
