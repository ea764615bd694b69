"""Scripted Prompter for testing."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar

from tuck.core.non_ideal_state import PromptCancelled
from tuck.gateway.prompter.abc import Choice, Prompter, Validator

T = TypeVar("T")

# str answers text prompts or picks a choice by label, int picks a choice by
# zero-based index, bool answers confirm, None cancels.
Response = str | int | bool | None


@dataclass(frozen=True)
class PromptRecord:
    """Record of one prompt shown to the user."""

    kind: str  # "text", "choose" or "confirm"
    prompt: str
    options: tuple[str, ...]


class FakePrompter(Prompter):
    """Replays scripted responses in order.

    Text validation mirrors the real prompter: a response that fails
    validation is recorded in `validation_errors` and the next response is
    consumed as the retry. Running out of responses cancels.

    Example:
        >>> prompter = FakePrompter(responses=["15"])
        >>> prompter.text("Line?", default=None, validate=None)
        '15'
    """

    def __init__(self, *, responses: Sequence[Response] | None = None) -> None:
        self._responses = list(responses) if responses is not None else []
        self._prompts: list[PromptRecord] = []
        self._validation_errors: list[str] = []
        self._notifications: list[str] = []

    def text(
        self,
        prompt: str,
        *,
        default: str | None,
        validate: Validator | None,
    ) -> str | PromptCancelled:
        while True:
            self._prompts.append(PromptRecord(kind="text", prompt=prompt, options=()))
            response = self._next()
            if response is None or isinstance(response, bool):
                return PromptCancelled()
            value = str(response)
            if not value:
                return PromptCancelled()
            if validate is None:
                return value
            error = validate(value)
            if error is None:
                return value
            self._validation_errors.append(error)

    def choose(self, prompt: str, choices: Sequence[Choice[T]]) -> T | PromptCancelled:
        self._prompts.append(
            PromptRecord(kind="choose", prompt=prompt, options=tuple(c.label for c in choices))
        )
        response = self._next()
        if response is None or isinstance(response, bool):
            return PromptCancelled()
        if isinstance(response, int):
            if response < 0 or response >= len(choices):
                return PromptCancelled()
            return choices[response].value
        for choice in choices:
            if choice.label == response:
                return choice.value
        return PromptCancelled()

    def confirm(self, prompt: str) -> bool | PromptCancelled:
        self._prompts.append(PromptRecord(kind="confirm", prompt=prompt, options=()))
        response = self._next()
        if not isinstance(response, bool):
            return PromptCancelled()
        return response

    def notify(self, message: str) -> None:
        self._notifications.append(message)

    def _next(self) -> Response:
        if not self._responses:
            return None
        return self._responses.pop(0)

    @property
    def prompts(self) -> list[PromptRecord]:
        """Read-only access to every prompt shown."""
        return list(self._prompts)

    @property
    def validation_errors(self) -> list[str]:
        """Read-only access to inline validation errors shown."""
        return list(self._validation_errors)

    @property
    def notifications(self) -> list[str]:
        """Read-only access to messages shown via notify."""
        return list(self._notifications)

    @property
    def remaining_responses(self) -> int:
        return len(self._responses)
