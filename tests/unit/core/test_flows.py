"""Tests for the prompt-driven move, assign and team flows."""

from pathlib import Path

from tuck.core.context import TuckContext
from tuck.core.flows import MembersViewed, prompt_move, run_assign, run_manage_team
from tuck.core.non_ideal_state import PromptCancelled, ValidationFailed
from tuck.core.results import TodoUpdated
from tuck.core.roster import MemberAdded, MemberRemoved
from tuck.core.types import Identity, TodoRecord
from tuck.gateway.document.fake import FakeDocumentEditor
from tuck.gateway.prompter.fake import FakePrompter, Response
from tuck.gateway.record_store.fake import FakeRecordStore
from tuck.gateway.team_store.fake import FakeTeamStore

APP = Path("/repo/src/app.ts")
ADA = Identity(name="Ada", email="ada@example.com")
BOB = Identity(name="Bob", email="bob@example.com")
CAROL = Identity(name="Carol", email="carol@example.com")


def _setup(
    responses: list[Response],
    *,
    assignees: tuple[Identity, ...] = (ADA,),
    team: tuple[Identity, ...] = (),
) -> tuple[TuckContext, FakePrompter, FakeRecordStore, FakeTeamStore, TodoRecord]:
    record = TodoRecord.test(
        kind="remote", file=str(APP), line=0, id="R1", author=ADA, assignees=assignees
    )
    prompter = FakePrompter(responses=responses)
    remote = FakeRecordStore(kind="remote", records=[record])
    team_store = FakeTeamStore(members=team)
    ctx = TuckContext.for_test(
        remote_store=remote,
        team_store=team_store,
        prompter=prompter,
        documents=FakeDocumentEditor(documents={APP: "a\nb\nc\nd\ne\n"}),
    )
    return ctx, prompter, remote, team_store, record


class TestPromptMove:
    def test_reprompts_until_in_range(self) -> None:
        ctx, prompter, remote, _, record = _setup(["0", "9", "3"])

        result = prompt_move(ctx.engine, prompter, record)

        assert isinstance(result, TodoUpdated)
        assert remote.records[0].line == 2
        assert prompter.validation_errors == [
            "Please enter a valid line number between 1 and 5",
            "Please enter a valid line number between 1 and 5",
        ]

    def test_cancel_does_not_mutate(self) -> None:
        ctx, prompter, remote, _, record = _setup([None])

        result = prompt_move(ctx.engine, prompter, record)

        assert isinstance(result, PromptCancelled)
        assert remote.saves == []


class TestRunAssign:
    def test_menu_lists_removals_roster_and_actions(self) -> None:
        """Roster members already assigned are not offered again."""
        ctx, prompter, _, _, record = _setup([None], team=(ADA, CAROL))

        run_assign(ctx.engine, prompter, record)

        assert prompter.prompts[0].options == (
            "Remove Ada",
            "Add Carol",
            "Add New Team Member",
            "Manage Team",
        )

    def test_menu_matches_assigned_emails_case_insensitively(self) -> None:
        """A roster entry differing from an assignee only by email case is not offered."""
        shouty_ada = Identity(name="Ada L", email=" ADA@Example.com")
        ctx, prompter, _, _, record = _setup([None], team=(shouty_ada, CAROL))

        run_assign(ctx.engine, prompter, record)

        assert prompter.prompts[0].options == (
            "Remove Ada",
            "Add Carol",
            "Add New Team Member",
            "Manage Team",
        )

    def test_remove_assignee(self) -> None:
        ctx, prompter, remote, _, record = _setup(["Remove Bob"], assignees=(ADA, BOB))

        result = run_assign(ctx.engine, prompter, record)

        assert isinstance(result, TodoUpdated)
        assert remote.records[0].assignees == (ADA,)

    def test_remove_last_assignee_rejected(self) -> None:
        ctx, prompter, remote, _, record = _setup(["Remove Ada"])

        result = run_assign(ctx.engine, prompter, record)

        assert isinstance(result, ValidationFailed)
        assert remote.records[0].assignees == (ADA,)

    def test_add_existing_member(self) -> None:
        ctx, prompter, remote, _, record = _setup(["Add Carol"], team=(CAROL,))

        run_assign(ctx.engine, prompter, record)

        assert remote.records[0].assignees == (ADA, CAROL)

    def test_add_new_after_failed_attempts_and_join_team(self) -> None:
        """Bad emails use up attempts; the accepted one is assigned and rostered."""
        ctx, prompter, remote, team_store, record = _setup(
            ["Add New Team Member", "no-at-sign", "ADA@example.com", "dan@example.com", "Dan", True]
        )

        result = run_assign(ctx.engine, prompter, record)

        dan = Identity(name="Dan", email="dan@example.com")
        assert isinstance(result, TodoUpdated)
        assert remote.records[0].assignees == (ADA, dan)
        assert team_store.members == (dan,)
        assert prompter.notifications == [
            "Please enter a valid email address (must contain @).",
            "This person is already assigned to this TODO.",
            "Added Dan to team",
        ]

    def test_add_new_without_joining_team(self) -> None:
        ctx, prompter, remote, team_store, record = _setup(
            ["Add New Team Member", "dan@example.com", "Dan", False]
        )

        run_assign(ctx.engine, prompter, record)

        assert len(remote.records[0].assignees) == 2
        assert team_store.saves == []

    def test_three_failed_attempts_abandon(self) -> None:
        ctx, prompter, remote, _, record = _setup(["Add New Team Member", "a", "   ", "c"])

        result = run_assign(ctx.engine, prompter, record)

        assert result == ValidationFailed(
            message="Assignee addition cancelled after 3 failed attempts."
        )
        assert remote.saves == []
        assert prompter.notifications[1] == "Email is required. Please enter a valid email address."

    def test_cancel_email_prompt(self) -> None:
        ctx, prompter, remote, _, record = _setup(["Add New Team Member", None])

        result = run_assign(ctx.engine, prompter, record)

        assert result == PromptCancelled(message="Assignee addition cancelled.")
        assert remote.saves == []

    def test_cancel_menu(self) -> None:
        ctx, prompter, remote, _, record = _setup([])

        assert isinstance(run_assign(ctx.engine, prompter, record), PromptCancelled)
        assert remote.saves == []

    def test_manage_team_delegates(self) -> None:
        ctx, prompter, remote, _, record = _setup(["Manage Team", "View All Members"], team=(BOB,))

        result = run_assign(ctx.engine, prompter, record)

        assert result == MembersViewed(members=(BOB,))
        assert remote.saves == []

    def test_local_record_has_no_assignees(self) -> None:
        ctx, prompter, _, _, _ = _setup([])

        result = run_assign(ctx.engine, prompter, TodoRecord.test())

        assert isinstance(result, ValidationFailed)


class TestManageTeam:
    def test_add_member_validates_inline(self) -> None:
        ctx, prompter, _, team_store, _ = _setup(
            ["Add Team Member", "ADA@example.com", "carol@example.com", "Carol"], team=(ADA,)
        )

        result = run_manage_team(ctx.roster, prompter)

        assert result == MemberAdded(member=CAROL)
        assert team_store.members == (ADA, CAROL)
        assert prompter.validation_errors == ["This person is already in the team"]

    def test_remove_member(self) -> None:
        ctx, prompter, _, team_store, _ = _setup(["Remove Bob"], team=(ADA, BOB))

        result = run_manage_team(ctx.roster, prompter)

        assert result == MemberRemoved(member=BOB)
        assert team_store.members == (ADA,)

    def test_menu_options(self) -> None:
        ctx, prompter, _, _, _ = _setup([None], team=(BOB,))

        run_manage_team(ctx.roster, prompter)

        assert prompter.prompts[0].options == ("Add Team Member", "Remove Bob", "View All Members")
