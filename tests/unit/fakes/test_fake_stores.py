"""Tests for the in-memory store fakes."""

from pathlib import Path

from tuck.core.non_ideal_state import PersistenceWriteFailed
from tuck.core.types import TodoRecord
from tuck.gateway.document.fake import FakeDocumentEditor
from tuck.gateway.document.types import DeleteLine
from tuck.gateway.record_store.fake import FakeRecordStore

ROOT = Path("/repo")


def test_record_store_tracks_saves_and_loads() -> None:
    store = FakeRecordStore(kind="local")
    record = TodoRecord.test()

    store.save(ROOT, [record])
    store.load(ROOT)

    assert store.records == (record,)
    assert store.saves == [(ROOT, (record,))]
    assert store.load_count == 1


def test_corrupt_store_recovers_after_save() -> None:
    """A corrupt fake loads empty with a warning until it is written."""
    store = FakeRecordStore(kind="local", records=[TodoRecord.test()], corrupt=True)

    first = store.load(ROOT)
    store.save(ROOT, [])
    second = store.load(ROOT)

    assert first.records == ()
    assert first.corrupt is not None
    assert second.corrupt is None


def test_failing_writes() -> None:
    store = FakeRecordStore(kind="remote", fail_writes=True)

    assert isinstance(store.save(ROOT, []), PersistenceWriteFailed)
    assert store.saves == []


def test_document_editor_applies_and_tracks() -> None:
    path = Path("/repo/a.py")
    editor = FakeDocumentEditor(documents={path: "a\nb\n"})

    editor.apply_edits(path, [DeleteLine(0)])

    assert editor.text(path) == "b\n"
    assert editor.applied_edits == [(path, (DeleteLine(0),))]
