"""Tests for the JSON-file record and team stores."""

import json
from pathlib import Path

from tuck.core.non_ideal_state import PersistenceWriteFailed
from tuck.core.types import Identity, TodoRecord
from tuck.gateway.record_store.abc import RecordsSaved
from tuck.gateway.record_store.real import JsonRecordStore
from tuck.gateway.team_store.real import JsonTeamStore

ADA = Identity(name="Ada", email="ada@example.com")


def _local_store() -> JsonRecordStore:
    return JsonRecordStore(kind="local", filename=".localtodos.json")


class TestJsonRecordStore:
    def test_missing_document_is_empty_without_warning(self, tmp_path: Path) -> None:
        loaded = _local_store().load(tmp_path)

        assert loaded.records == ()
        assert loaded.corrupt is None

    def test_save_then_load(self, tmp_path: Path) -> None:
        store = JsonRecordStore(kind="remote", filename=".remotetodos.json")
        record = TodoRecord.test(kind="remote", file=str(tmp_path / "a.ts"), id="r1")

        assert store.save(tmp_path, [record]) == RecordsSaved(count=1)
        assert store.load(tmp_path).records == (record,)

    def test_document_format(self, tmp_path: Path) -> None:
        """Documents are 2-space indented JSON arrays with a trailing newline."""
        store = _local_store()
        store.save(tmp_path, [TodoRecord.test(file="/repo/a.py", line=1, id="/repo/a.py:1:0")])

        content = (tmp_path / ".localtodos.json").read_text(encoding="utf-8")

        assert content.endswith("]\n")
        assert '\n  {\n    "file": "/repo/a.py"' in content
        assert json.loads(content)[0]["type"] == "local"

    def test_load_is_idempotent(self, tmp_path: Path) -> None:
        store = _local_store()
        store.save(tmp_path, [TodoRecord.test(line=1), TodoRecord.test(line=2)])

        assert store.load(tmp_path) == store.load(tmp_path)

    def test_invalid_json_is_corrupt(self, tmp_path: Path) -> None:
        (tmp_path / ".localtodos.json").write_text("{not json", encoding="utf-8")

        loaded = _local_store().load(tmp_path)

        assert loaded.records == ()
        assert loaded.corrupt is not None
        assert loaded.corrupt.path == str(tmp_path / ".localtodos.json")

    def test_non_array_is_corrupt(self, tmp_path: Path) -> None:
        (tmp_path / ".localtodos.json").write_text('{"file": "x"}', encoding="utf-8")

        loaded = _local_store().load(tmp_path)

        assert loaded.records == ()
        assert loaded.corrupt is not None
        assert "expected a JSON array" in loaded.corrupt.message

    def test_bad_entries_are_set_aside(self, tmp_path: Path) -> None:
        """One malformed element does not make the document corrupt."""
        items = [{"line": 1}, {"file": "/repo/a.py", "line": 1, "message": "ok"}]
        (tmp_path / ".localtodos.json").write_text(json.dumps(items), encoding="utf-8")

        loaded = _local_store().load(tmp_path)

        assert [r.message for r in loaded.records] == ["ok"]
        assert loaded.unparsed == ({"line": 1},)
        assert loaded.corrupt is None

    def test_bad_entries_written_back_unchanged(self, tmp_path: Path) -> None:
        """Saving after a load keeps entries that could not be read as records."""
        kept = {"line": "3", "message": "keep me"}
        path = tmp_path / ".localtodos.json"
        path.write_text(
            json.dumps([kept, {"file": "/x.ts", "line": 1, "message": "other"}]), encoding="utf-8"
        )
        store = _local_store()
        loaded = store.load(tmp_path)

        store.save(tmp_path, [], unparsed=loaded.unparsed)

        assert json.loads(path.read_text(encoding="utf-8")) == [kept]

    def test_non_ascii_written_raw(self, tmp_path: Path) -> None:
        _local_store().save(tmp_path, [TodoRecord.test(message="café ✓")])

        assert "café ✓" in (tmp_path / ".localtodos.json").read_text(encoding="utf-8")

    def test_write_failure(self, tmp_path: Path) -> None:
        """A project root that cannot hold the document reports a failed write."""
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")

        result = _local_store().save(blocker, [TodoRecord.test()])

        assert isinstance(result, PersistenceWriteFailed)

    def test_no_temp_files_left_behind(self, tmp_path: Path) -> None:
        _local_store().save(tmp_path, [TodoRecord.test()])

        assert [p.name for p in tmp_path.iterdir()] == [".localtodos.json"]


class TestJsonTeamStore:
    def test_save_then_load(self, tmp_path: Path) -> None:
        store = JsonTeamStore(filename=".todoteam.json")

        assert store.save(tmp_path, [ADA]) is None
        assert store.load(tmp_path).members == (ADA,)
        assert json.loads((tmp_path / ".todoteam.json").read_text(encoding="utf-8")) == [
            {"name": "Ada", "email": "ada@example.com"}
        ]

    def test_corrupt_roster(self, tmp_path: Path) -> None:
        (tmp_path / ".todoteam.json").write_text("42", encoding="utf-8")

        loaded = JsonTeamStore(filename=".todoteam.json").load(tmp_path)

        assert loaded.members == ()
        assert loaded.corrupt is not None
