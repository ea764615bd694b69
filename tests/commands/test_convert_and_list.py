"""Tests for convert, add, scan and list commands."""

import json
from pathlib import Path

from click.testing import CliRunner

from tuck.cli.cli import cli
from tuck.core.context import TuckContext
from tuck.core.types import Identity, TodoRecord
from tuck.gateway.document.fake import FakeDocumentEditor
from tuck.gateway.identity.fake import FakeIdentityProvider
from tuck.gateway.prompter.fake import FakePrompter
from tuck.gateway.record_store.fake import FakeRecordStore

APP = Path("/repo/src/app.ts")
SOURCE = "const a = 1;\n// TODO: fix bug\nreturn a; // TODO: tidy\n"
BOB = Identity(name="Bob", email="bob@example.com")


def test_convert_local_comment() -> None:
    """LINE is 1-based on the command line and stored 0-based."""
    documents = FakeDocumentEditor(documents={APP: SOURCE})
    local = FakeRecordStore(kind="local")
    ctx = TuckContext.for_test(documents=documents, local_store=local)

    result = CliRunner().invoke(cli, ["convert", "src/app.ts", "2"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 0, result.output
    assert [(r.line, r.message) for r in local.records] == [(1, "fix bug")]
    assert documents.text(APP) == "const a = 1;\nreturn a; // TODO: tidy\n"
    assert 'Converted to local TODO "fix bug" at src/app.ts:2' in result.output


def test_convert_remote_without_git_identity() -> None:
    documents = FakeDocumentEditor(documents={APP: SOURCE})
    remote = FakeRecordStore(kind="remote")
    ctx = TuckContext.for_test(
        documents=documents, remote_store=remote, identity=FakeIdentityProvider(None)
    )

    result = CliRunner().invoke(
        cli, ["convert", "src/app.ts", "2", "--remote"], obj=ctx, catch_exceptions=False
    )

    assert result.exit_code == 1
    assert "Git user information not available" in result.output
    assert remote.records == ()
    assert documents.text(APP) == SOURCE


def test_convert_into_corrupt_store_warns() -> None:
    local = FakeRecordStore(kind="local", corrupt=True)
    ctx = TuckContext.for_test(
        documents=FakeDocumentEditor(documents={APP: SOURCE}), local_store=local
    )

    result = CliRunner().invoke(cli, ["convert", "src/app.ts", "2"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 0, result.output
    assert "Warning: Failed to load local TODOs" in result.output
    assert [r.message for r in local.records] == ["fix bug"]


def test_convert_line_without_todo() -> None:
    ctx = TuckContext.for_test(documents=FakeDocumentEditor(documents={APP: SOURCE}))

    result = CliRunner().invoke(cli, ["convert", "src/app.ts", "1"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 1
    assert "No TODO message found on line 1" in result.output


def test_convert_rejects_line_zero() -> None:
    ctx = TuckContext.for_test(documents=FakeDocumentEditor(documents={APP: SOURCE}))

    result = CliRunner().invoke(cli, ["convert", "src/app.ts", "0"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 1
    assert "Line numbers start at 1" in result.output


def test_add_prompts_for_message() -> None:
    remote = FakeRecordStore(kind="remote")
    ctx = TuckContext.for_test(
        documents=FakeDocumentEditor(documents={APP: SOURCE}),
        remote_store=remote,
        prompter=FakePrompter(responses=["Write docs"]),
    )

    result = CliRunner().invoke(cli, ["add", "src/app.ts", "1"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 0, result.output
    assert [(r.line, r.message) for r in remote.records] == [(0, "Write docs")]


def test_add_cancelled() -> None:
    remote = FakeRecordStore(kind="remote")
    ctx = TuckContext.for_test(
        documents=FakeDocumentEditor(documents={APP: SOURCE}),
        remote_store=remote,
        prompter=FakePrompter(responses=[None]),
    )

    result = CliRunner().invoke(cli, ["add", "src/app.ts", "1"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 1
    assert "Cancelled." in result.output
    assert remote.saves == []


def test_scan_reports_comment_only_lines() -> None:
    ctx = TuckContext.for_test(documents=FakeDocumentEditor(documents={APP: SOURCE}))

    result = CliRunner().invoke(cli, ["scan", "src/app.ts"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 0, result.output
    assert "// TODO: fix bug" in result.output
    assert "tidy" not in result.output


def test_list_json_includes_visible_remote_only() -> None:
    local_record = TodoRecord.test(file=str(APP), line=1, message="local one", id="L1")
    visible = TodoRecord.test(kind="remote", file=str(APP), message="shared", id="R1")
    hidden = TodoRecord.test(
        kind="remote", file=str(APP), message="secret", id="R2", author=BOB, assignees=(BOB,)
    )
    ctx = TuckContext.for_test(local_records=[local_record], remote_records=[visible, hidden])

    result = CliRunner().invoke(cli, ["list", "--json"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert [item["id"] for item in data] == ["L1", "R1"]
    assert data[1]["assignees"] == [{"name": "Ada", "email": "ada@example.com"}]


def test_list_table() -> None:
    ctx = TuckContext.for_test(
        local_records=[TodoRecord.test(file=str(APP), line=1, message="local one", id="L1")]
    )

    result = CliRunner().invoke(cli, ["list", "--local"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 0, result.output
    assert "local one" in result.output
    assert "src/app.ts:2" in result.output


def test_list_filters_by_line() -> None:
    first = TodoRecord.test(file=str(APP), line=0, message="first", id="L1")
    second = TodoRecord.test(file=str(APP), line=1, message="second", id="L2")
    ctx = TuckContext.for_test(local_records=[first, second])

    result = CliRunner().invoke(
        cli,
        ["list", "--local", "--file", "src/app.ts", "--line", "2", "--json"],
        obj=ctx,
        catch_exceptions=False,
    )

    assert [item["id"] for item in json.loads(result.stdout)] == ["L2"]


def test_list_empty() -> None:
    result = CliRunner().invoke(cli, ["list"], obj=TuckContext.for_test(), catch_exceptions=False)

    assert result.exit_code == 0
    assert "No TODOs found." in result.output


def test_list_warns_on_corrupt_store() -> None:
    ctx = TuckContext.for_test(local_store=FakeRecordStore(kind="local", corrupt=True))

    result = CliRunner().invoke(cli, ["list", "--local"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 0
    assert "Warning: Failed to load local TODOs" in result.output


def test_list_local_and_remote_are_exclusive() -> None:
    result = CliRunner().invoke(
        cli, ["list", "--local", "--remote"], obj=TuckContext.for_test(), catch_exceptions=False
    )

    assert result.exit_code == 1
