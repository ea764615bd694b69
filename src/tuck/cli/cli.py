import logging

import click

from tuck.cli.commands.add import add_cmd
from tuck.cli.commands.assign import assign_cmd
from tuck.cli.commands.convert import convert_cmd
from tuck.cli.commands.edit import edit_cmd
from tuck.cli.commands.init import init_cmd
from tuck.cli.commands.list_cmd import list_cmd
from tuck.cli.commands.move import move_cmd
from tuck.cli.commands.remove import remove_cmd
from tuck.cli.commands.restore import restore_cmd
from tuck.cli.commands.scan import scan_cmd
from tuck.cli.commands.team.group import team_group
from tuck.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="tuck")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Tuck TODO comments away into local or shared TODO records."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()


cli.add_command(init_cmd)
cli.add_command(scan_cmd)
cli.add_command(convert_cmd)
cli.add_command(add_cmd)
cli.add_command(list_cmd)
cli.add_command(restore_cmd)
cli.add_command(edit_cmd)
cli.add_command(move_cmd)
cli.add_command(remove_cmd)
cli.add_command(assign_cmd)
cli.add_command(team_group)
