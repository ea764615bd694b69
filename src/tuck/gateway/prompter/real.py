"""Terminal prompts via click."""

from collections.abc import Sequence
from typing import TypeVar

import click

from tuck.core.non_ideal_state import PromptCancelled
from tuck.gateway.prompter.abc import Choice, Prompter, Validator
from tuck.output import user_output

T = TypeVar("T")


class ClickPrompter(Prompter):
    """Production implementation using click.prompt / click.confirm.

    Prompts are written to stderr so stdout stays machine-readable.
    """

    def text(
        self,
        prompt: str,
        *,
        default: str | None,
        validate: Validator | None,
    ) -> str | PromptCancelled:
        while True:
            try:
                value = click.prompt(
                    prompt,
                    default=default if default is not None else "",
                    show_default=default is not None,
                    err=True,
                )
            except click.Abort:
                return PromptCancelled()

            if not value:
                return PromptCancelled()
            if validate is None:
                return value
            error = validate(value)
            if error is None:
                return value
            user_output(click.style(error, fg="red"))

    def choose(self, prompt: str, choices: Sequence[Choice[T]]) -> T | PromptCancelled:
        if not choices:
            return PromptCancelled()

        user_output(prompt)
        for index, choice in enumerate(choices, start=1):
            line = f"  {index}. {choice.label}"
            if choice.description:
                line += click.style(f"  {choice.description}", dim=True)
            user_output(line)

        try:
            selection = click.prompt(
                "Select number",
                type=click.IntRange(1, len(choices)),
                err=True,
            )
        except click.Abort:
            return PromptCancelled()
        return choices[selection - 1].value

    def confirm(self, prompt: str) -> bool | PromptCancelled:
        try:
            return click.confirm(prompt, default=False, err=True)
        except click.Abort:
            return PromptCancelled()

    def notify(self, message: str) -> None:
        user_output(message)
