"""Tests for TeamRoster and email validation."""

from pathlib import Path

from tuck.core.non_ideal_state import NotFound, PersistenceWriteFailed
from tuck.core.roster import MemberAdded, MemberConflict, MemberRemoved, TeamRoster, validate_email
from tuck.core.types import Identity
from tuck.gateway.team_store.fake import FakeTeamStore

ROOT = Path("/repo")
ADA = Identity(name="Ada", email="ada@example.com")
BOB = Identity(name="Bob", email="bob@example.com")


class TestValidateEmail:
    def test_blank(self) -> None:
        assert (
            validate_email("   ", (), taken_message="taken")
            == "Email is required. Please enter a valid email address."
        )

    def test_missing_at(self) -> None:
        assert (
            validate_email("bob.example.com", (), taken_message="taken")
            == "Please enter a valid email address (must contain @)."
        )

    def test_taken_case_insensitive(self) -> None:
        """Duplicates are detected ignoring case and surrounding whitespace."""
        assert validate_email("  ADA@example.com ", (ADA,), taken_message="taken") == "taken"

    def test_valid(self) -> None:
        assert validate_email("bob@example.com", (ADA,), taken_message="taken") is None


class TestTeamRoster:
    def test_add_appends_in_order(self) -> None:
        store = FakeTeamStore(members=[ADA])
        roster = TeamRoster(store, ROOT)

        result = roster.add(BOB)

        assert result == MemberAdded(member=BOB)
        assert store.members == (ADA, BOB)

    def test_add_duplicate_email_conflicts(self) -> None:
        """Exact email duplicates are rejected and nothing is saved."""
        store = FakeTeamStore(members=[ADA])
        roster = TeamRoster(store, ROOT)

        result = roster.add(Identity(name="Other Ada", email="ada@example.com"))

        assert isinstance(result, MemberConflict)
        assert result.message == "Team member with email ada@example.com already exists."
        assert store.saves == []

    def test_remove(self) -> None:
        store = FakeTeamStore(members=[ADA, BOB])

        result = TeamRoster(store, ROOT).remove("ada@example.com")

        assert result == MemberRemoved(member=ADA)
        assert store.members == (BOB,)

    def test_remove_unknown(self) -> None:
        result = TeamRoster(FakeTeamStore(members=[ADA]), ROOT).remove("bob@example.com")

        assert isinstance(result, NotFound)
        assert result.message == "Team member with email bob@example.com not found."

    def test_write_failure_is_reported(self) -> None:
        result = TeamRoster(FakeTeamStore(fail_writes=True), ROOT).add(ADA)

        assert isinstance(result, PersistenceWriteFailed)
