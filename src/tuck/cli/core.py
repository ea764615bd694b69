"""Shared helpers for tuck commands."""

import os
from pathlib import Path

import click

from tuck.cli.ensure import Ensure
from tuck.core.context import TuckContext
from tuck.core.types import TodoKind, TodoRecord


def kind_from_flag(remote: bool) -> TodoKind:
    return "remote" if remote else "local"


def resolve_source_path(ctx: TuckContext, file: str) -> Path:
    """Absolute, normalized path of a FILE argument relative to the cwd."""
    return Path(os.path.abspath(ctx.cwd / file))


def zero_based_line(line: int) -> int:
    """Convert a 1-based LINE argument to the stored 0-based form."""
    Ensure.invariant(line >= 1, f"Line numbers start at 1 (got {line})")
    return line - 1


def resolve_record(ctx: TuckContext, kind: TodoKind, reference: str) -> TodoRecord:
    """Look up a record by id or unique id prefix, exiting on failure."""
    return Ensure.ideal_state(ctx.engine.find(kind, reference))


def display_path(ctx: TuckContext, file: str) -> str:
    """Path relative to the project root when inside it."""
    path = Path(file)
    if path.is_relative_to(ctx.project_root):
        return str(path.relative_to(ctx.project_root))
    return file


def format_location(ctx: TuckContext, record: TodoRecord) -> str:
    return click.style(f"{display_path(ctx, record.file)}:{record.line + 1}", fg="cyan")
