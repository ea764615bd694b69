"""Add command - create a remote TODO without a source comment."""

import click

from tuck.cli.core import format_location, resolve_source_path, zero_based_line
from tuck.cli.ensure import Ensure
from tuck.core.context import TuckContext
from tuck.output import user_output


def _message_error(value: str) -> str | None:
    if not value.strip():
        return "TODO message cannot be empty."
    return None


@click.command("add")
@click.argument("file")
@click.argument("line", type=int)
@click.argument("message", required=False)
@click.pass_obj
def add_cmd(ctx: TuckContext, file: str, line: int, message: str | None) -> None:
    """Add a remote TODO at LINE of FILE, assigned to you.

    Prompts for MESSAGE when it is not given.
    """
    path = resolve_source_path(ctx, file)
    stored_line = zero_based_line(line)
    if message is None:
        message = Ensure.ideal_state(
            ctx.prompter.text(
                "Enter the remote TODO message", default=None, validate=_message_error
            )
        )

    result = Ensure.ideal_state(ctx.engine.add_remote(path, stored_line, message))
    if result.store_warning is not None:
        Ensure.warn(result.store_warning)
    user_output(
        click.style("✓", fg="green")
        + f' Remote TODO "{result.record.message}" added at {format_location(ctx, result.record)}'
    )
    user_output(click.style(f"  id: {result.record.id}", dim=True))
