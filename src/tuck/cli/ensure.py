"""CLI error handling for non-ideal-state type narrowing.

Core operations return `T | NonIdealState`. Commands narrow those unions
through Ensure: a non-ideal outcome is printed as an error and the command
exits with status 1.
"""

from typing import TypeVar

import click

from tuck.core.non_ideal_state import NonIdealState, PersistenceCorrupt, PromptCancelled
from tuck.output import user_output

T = TypeVar("T")


class Ensure:
    """Helper class for narrowing non-ideal-state discriminated unions."""

    @staticmethod
    def ideal_state(result: T | NonIdealState) -> T:
        """Ensure result is not a NonIdealState, otherwise exit with error.

        Cancellation prints its message without the error prefix.

        Raises:
            SystemExit: If result is NonIdealState (with exit code 1)
        """
        if isinstance(result, PromptCancelled):
            user_output(result.message)
            raise SystemExit(1)
        if isinstance(result, NonIdealState):
            user_output(click.style("Error: ", fg="red") + result.message)
            raise SystemExit(1)
        return result

    @staticmethod
    def invariant(condition: bool, message: str) -> None:
        if not condition:
            user_output(click.style("Error: ", fg="red") + message)
            raise SystemExit(1)

    @staticmethod
    def warn(state: NonIdealState) -> None:
        """Print a non-fatal outcome without changing the exit status."""
        user_output(click.style("Warning: ", fg="yellow") + state.message)

    @staticmethod
    def warn_all(states: tuple[PersistenceCorrupt, ...]) -> None:
        for state in states:
            Ensure.warn(state)
