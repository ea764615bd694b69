"""Tests for the record JSON wire format."""

from tuck.core.json_format import record_from_json, record_to_json, records_from_json
from tuck.core.types import Identity, TodoRecord

ADA = Identity(name="Ada", email="ada@example.com")
BOB = Identity(name="Bob", email="bob@example.com")


def test_local_record_wire_keys() -> None:
    """Local records carry no author, assignees or timestamps; column only when set."""
    record = TodoRecord.test(file="/repo/a.ts", line=3, message="fix", id="/repo/a.ts:3:0")

    assert record_to_json(record) == {
        "file": "/repo/a.ts",
        "line": 3,
        "type": "local",
        "message": "fix",
        "id": "/repo/a.ts:3:0",
    }


def test_remote_record_wire_keys() -> None:
    record = TodoRecord.test(
        kind="remote",
        file="/repo/a.ts",
        line=3,
        column=7,
        message="fix",
        id="remote-/repo/a.ts:3:7:1",
        author=ADA,
        assignees=(ADA, BOB),
    )

    data = record_to_json(record)

    assert data["type"] == "remote"
    assert data["column"] == 7
    assert data["author"] == {"name": "Ada", "email": "ada@example.com"}
    assert data["assignees"] == [
        {"name": "Ada", "email": "ada@example.com"},
        {"name": "Bob", "email": "bob@example.com"},
    ]
    assert data["createdAt"] == "2024-01-15T10:30:00+00:00"
    assert record_from_json(data, "remote") == record


def test_legacy_local_entry_gets_derived_id() -> None:
    """Entries written before ids existed get their deterministic local id."""
    record = record_from_json({"file": "/repo/a.py", "line": 2, "message": "m"}, "local")

    assert record is not None
    assert record.id == "/repo/a.py:2:0"


def test_legacy_remote_entry_gets_derived_id() -> None:
    data = {
        "file": "/repo/a.py",
        "line": 2,
        "message": "m",
        "author": {"name": "Ada", "email": "ada@example.com"},
        "assignees": [{"name": "Ada", "email": "ada@example.com"}],
        "createdAt": "2024-01-01T00:00:00Z",
    }

    record = record_from_json(data, "remote")

    assert record is not None
    assert record.id == "remote-/repo/a.py:2:0:2024-01-01T00:00:00Z"
    assert record.updated_at == "2024-01-01T00:00:00Z"


def test_store_kind_overrides_type_field() -> None:
    """The store being loaded decides the kind."""
    record = record_from_json(
        {"file": "/repo/a.py", "line": 0, "message": "m", "type": "remote", "id": "x"}, "local"
    )

    assert record is not None
    assert record.kind == "local"


def test_remote_without_assignees_is_rejected() -> None:
    data = {
        "file": "/repo/a.py",
        "line": 0,
        "message": "m",
        "author": {"name": "Ada", "email": "ada@example.com"},
        "assignees": [],
    }

    assert record_from_json(data, "remote") is None


def test_duplicate_assignees_are_collapsed() -> None:
    """Assignees stay unique by email."""
    data = {
        "file": "/repo/a.py",
        "line": 0,
        "message": "m",
        "id": "r1",
        "author": {"name": "Ada", "email": "ada@example.com"},
        "assignees": [
            {"name": "Ada", "email": "ada@example.com"},
            {"name": "Ada Again", "email": "ada@example.com"},
        ],
    }

    record = record_from_json(data, "remote")

    assert record is not None
    assert record.assignees == (ADA,)


def test_malformed_entries_are_kept_raw() -> None:
    """Bad elements are set aside without discarding the rest of the array."""
    items = [
        "not an object",
        {"file": "/repo/a.py", "message": "no line"},
        {"file": "/repo/a.py", "line": -1, "message": "negative"},
        {"file": "/repo/a.py", "line": 1, "message": "good", "id": "g"},
    ]

    records, unparsed = records_from_json(items, "local")

    assert [r.message for r in records] == ["good"]
    assert unparsed == tuple(items[:3])
