"""Abstract interface for interactive user prompts.

Cancellation (Ctrl-C, EOF, empty input) is reported as PromptCancelled and
is distinct from a validation failure: validation failures are shown and
the prompt is repeated.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from tuck.core.non_ideal_state import PromptCancelled

T = TypeVar("T")

# Returns an error message to re-prompt with, or None when the value is acceptable.
Validator = Callable[[str], str | None]


@dataclass(frozen=True)
class Choice(Generic[T]):
    """One labeled entry of a selection list.

    Attributes:
        label: Primary text shown for the entry
        description: Secondary text (e.g., an email), may be empty
        value: Value returned when the entry is selected
    """

    label: str
    description: str
    value: T


class Prompter(ABC):
    """Abstract user interaction boundary."""

    @abstractmethod
    def text(
        self,
        prompt: str,
        *,
        default: str | None,
        validate: Validator | None,
    ) -> str | PromptCancelled:
        """Ask for a single line of text.

        Args:
            prompt: Question to show
            default: Pre-filled value, or None
            validate: Inline validation; an error message re-prompts

        Returns:
            The accepted text, or PromptCancelled
        """
        ...

    @abstractmethod
    def choose(self, prompt: str, choices: Sequence[Choice[T]]) -> T | PromptCancelled:
        """Ask the user to pick one entry.

        Returns:
            The selected entry's value, or PromptCancelled
        """
        ...

    @abstractmethod
    def confirm(self, prompt: str) -> bool | PromptCancelled:
        """Ask a yes/no question."""
        ...

    @abstractmethod
    def notify(self, message: str) -> None:
        """Show an informational or error message during a flow."""
        ...
