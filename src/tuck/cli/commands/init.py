"""Init command - write the project config and gitignore entries."""

import click

from tuck.cli.ensure import Ensure
from tuck.core.config import config_path
from tuck.core.context import TuckContext
from tuck.core.init_utils import add_gitignore_entry, build_config_toml, local_only_files
from tuck.output import user_output


@click.command("init")
@click.option("--force", is_flag=True, help="Overwrite an existing .tuck/config.toml")
@click.pass_obj
def init_cmd(ctx: TuckContext, force: bool) -> None:
    """Set up tuck for the current project.

    Writes .tuck/config.toml with the current settings and, unless
    gitignore management is disabled, ignores the local TODO and team
    documents. The remote TODO document is meant to be committed.
    """
    cfg_path = config_path(ctx.project_root)
    if cfg_path.exists() and not force:
        user_output(f"Config already exists at {cfg_path} (use --force to overwrite)")
    else:
        try:
            cfg_path.parent.mkdir(parents=True, exist_ok=True)
            cfg_path.write_text(build_config_toml(ctx.config), encoding="utf-8")
        except OSError as e:
            Ensure.invariant(False, f"Failed to write {cfg_path}: {e}")
        user_output(click.style("✓", fg="green") + f" Wrote {cfg_path}")

    if not ctx.config.manage_gitignore:
        return

    gitignore_path = ctx.project_root / ".gitignore"
    try:
        content = gitignore_path.read_text(encoding="utf-8") if gitignore_path.exists() else ""
    except OSError as e:
        Ensure.invariant(False, f"Failed to read {gitignore_path}: {e}")
        return

    updated = content
    for entry in local_only_files(ctx.config):
        updated = add_gitignore_entry(updated, entry)
    if updated == content:
        user_output(".gitignore already ignores local TODO files")
        return

    try:
        gitignore_path.write_text(updated, encoding="utf-8")
    except OSError as e:
        Ensure.invariant(False, f"Failed to write {gitignore_path}: {e}")
    user_output(click.style("✓", fg="green") + f" Updated {gitignore_path}")
