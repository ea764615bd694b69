"""JSON wire format for records and identities.

Records are stored with camelCase keys:

    {
      "file": "/abs/path.py",
      "line": 4,
      "column": 10,            # only when several TODOs shared the line
      "type": "remote",
      "message": "fix bug",
      "id": "remote-/abs/path.py:4:10:1705314600000",
      "author": {"name": "Ada", "email": "ada@example.com"},
      "assignees": [{"name": "Ada", "email": "ada@example.com"}],
      "createdAt": "2024-01-15T10:30:00+00:00",
      "updatedAt": "2024-01-15T10:30:00+00:00"
    }

Local records omit the remote-only keys.
"""

import logging
from typing import Any

from tuck.core.types import Identity, TodoKind, TodoRecord, local_record_id

logger = logging.getLogger(__name__)


def identity_to_json(identity: Identity) -> dict[str, str]:
    return {"name": identity.name, "email": identity.email}


def identity_from_json(data: Any) -> Identity | None:
    """Parse an identity object, or None if it is malformed."""
    if not isinstance(data, dict):
        return None
    name = data.get("name")
    email = data.get("email")
    if not isinstance(email, str) or not email:
        return None
    return Identity(name=name if isinstance(name, str) else email, email=email)


def record_to_json(record: TodoRecord) -> dict[str, Any]:
    data: dict[str, Any] = {
        "file": record.file,
        "line": record.line,
    }
    if record.column is not None:
        data["column"] = record.column
    data["type"] = record.kind
    data["message"] = record.message
    data["id"] = record.id
    if record.is_remote:
        if record.author is not None:
            data["author"] = identity_to_json(record.author)
        data["assignees"] = [identity_to_json(a) for a in record.assignees]
        data["createdAt"] = record.created_at
        data["updatedAt"] = record.updated_at
    return data


def record_from_json(data: Any, kind: TodoKind) -> TodoRecord | None:
    """Parse one persisted record for a store of the given kind.

    Entries missing `file`, `line` or `message`, and remote entries missing
    an author or assignees, are rejected (None). Entries without an `id`
    get a derived one.

    Args:
        data: One element of the persisted array
        kind: Kind of the store being loaded; authoritative over `type`

    Returns:
        TodoRecord, or None if the entry is unusable
    """
    if not isinstance(data, dict):
        return None

    file = data.get("file")
    line = data.get("line")
    message = data.get("message")
    if not isinstance(file, str) or not isinstance(message, str):
        return None
    if not isinstance(line, int) or isinstance(line, bool) or line < 0:
        return None

    column = data.get("column")
    if not isinstance(column, int) or isinstance(column, bool):
        column = None

    record_id = data.get("id")
    if kind == "local":
        if not isinstance(record_id, str) or not record_id:
            record_id = local_record_id(file, line, column)
        return TodoRecord(
            file=file,
            line=line,
            kind="local",
            message=message,
            id=record_id,
            column=column,
            author=None,
            assignees=(),
            created_at=None,
            updated_at=None,
        )

    author = identity_from_json(data.get("author"))
    raw_assignees = data.get("assignees")
    assignees: list[Identity] = []
    if isinstance(raw_assignees, list):
        for raw in raw_assignees:
            assignee = identity_from_json(raw)
            if assignee is None or any(a.email == assignee.email for a in assignees):
                continue
            assignees.append(assignee)
    if author is None or not assignees:
        return None

    created_at = data.get("createdAt")
    updated_at = data.get("updatedAt")
    if not isinstance(created_at, str):
        created_at = None
    if not isinstance(updated_at, str):
        updated_at = created_at

    if not isinstance(record_id, str) or not record_id:
        record_id = f"remote-{file}:{line}:{column or 0}:{created_at}"

    return TodoRecord(
        file=file,
        line=line,
        kind="remote",
        message=message,
        id=record_id,
        column=column,
        author=author,
        assignees=tuple(assignees),
        created_at=created_at,
        updated_at=updated_at,
    )


def records_from_json(
    items: list[Any], kind: TodoKind
) -> tuple[tuple[TodoRecord, ...], tuple[Any, ...]]:
    """Parse a persisted array into records and the raw entries left unread.

    Unusable entries are logged and returned as-is so they can be written
    back unchanged.
    """
    records = []
    unparsed = []
    for index, item in enumerate(items):
        record = record_from_json(item, kind)
        if record is None:
            logger.warning("Keeping unreadable %s TODO entry at index %d as-is", kind, index)
            unparsed.append(item)
            continue
        records.append(record)
    return tuple(records), tuple(unparsed)
