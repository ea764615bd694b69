"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

import click

from tuck.core.cache import ReadCache
from tuck.core.config import ConfigInvalid, TuckConfig, load_config
from tuck.core.engine import TodoEngine
from tuck.core.locking import ProjectLocks
from tuck.core.project_discovery import discover_project_root
from tuck.core.roster import TeamRoster
from tuck.core.types import Identity, TodoRecord
from tuck.gateway.document.abc import DocumentEditor
from tuck.gateway.document.fake import FakeDocumentEditor
from tuck.gateway.document.real import FileDocumentEditor
from tuck.gateway.identity.abc import IdentityProvider
from tuck.gateway.identity.fake import FakeIdentityProvider
from tuck.gateway.identity.real import GitConfigIdentityProvider
from tuck.gateway.prompter.abc import Prompter
from tuck.gateway.prompter.fake import FakePrompter
from tuck.gateway.prompter.real import ClickPrompter
from tuck.gateway.record_store.abc import RecordLoad, RecordStore
from tuck.gateway.record_store.fake import FakeRecordStore
from tuck.gateway.record_store.real import JsonRecordStore
from tuck.gateway.team_store.abc import TeamStore
from tuck.gateway.team_store.fake import FakeTeamStore
from tuck.gateway.team_store.real import JsonTeamStore
from tuck.gateway.time.abc import Time
from tuck.gateway.time.fake import FakeTime
from tuck.gateway.time.real import RealTime
from tuck.output import user_output


@dataclass(frozen=True)
class TuckContext:
    """Immutable context holding all dependencies for tuck commands.

    Created at CLI entry point and threaded through the application via
    click's `ctx.obj`. The engine, its read cache and the roster live here
    for the duration of one invocation.
    """

    engine: TodoEngine
    prompter: Prompter
    time: Time
    config: TuckConfig
    cwd: Path  # Current working directory at CLI invocation
    project_root: Path

    @property
    def roster(self) -> TeamRoster:
        return self.engine.roster

    @staticmethod
    def build(
        *,
        cwd: Path,
        project_root: Path,
        config: TuckConfig,
        local_store: RecordStore,
        remote_store: RecordStore,
        team_store: TeamStore,
        identity: IdentityProvider,
        documents: DocumentEditor,
        prompter: Prompter,
        time: Time,
    ) -> "TuckContext":
        """Wire an engine and roster from gateway implementations."""
        roster = TeamRoster(team_store, project_root)
        engine = TodoEngine(
            project_root=project_root,
            cwd=cwd,
            local_store=local_store,
            remote_store=remote_store,
            identity=identity,
            documents=documents,
            time=time,
            cache=ReadCache[RecordLoad](time, ttl_seconds=config.cache_ttl_seconds),
            roster=roster,
            locks=ProjectLocks(),
        )
        return TuckContext(
            engine=engine,
            prompter=prompter,
            time=time,
            config=config,
            cwd=cwd,
            project_root=project_root,
        )

    @staticmethod
    def for_test(
        *,
        local_records: list[TodoRecord] | None = None,
        remote_records: list[TodoRecord] | None = None,
        local_store: FakeRecordStore | None = None,
        remote_store: FakeRecordStore | None = None,
        team_store: FakeTeamStore | None = None,
        identity: IdentityProvider | None = None,
        documents: DocumentEditor | None = None,
        prompter: Prompter | None = None,
        time: Time | None = None,
        config: TuckConfig | None = None,
        cwd: Path | None = None,
        project_root: Path | None = None,
    ) -> "TuckContext":
        """Create test context with fakes for every gateway.

        Args:
            local_records: Initial local records when local_store is None
            remote_records: Initial remote records when remote_store is None
            identity: Defaults to Ada <ada@example.com>
            cwd: Defaults to Path("/repo")
            project_root: Defaults to cwd

        Example:
            >>> ctx = TuckContext.for_test(documents=FakeDocumentEditor(documents={...}))
            >>> result = runner.invoke(cli, ["list"], obj=ctx)
        """
        resolved_cwd = cwd if cwd is not None else Path("/repo")
        return TuckContext.build(
            cwd=resolved_cwd,
            project_root=project_root if project_root is not None else resolved_cwd,
            config=config if config is not None else TuckConfig.default(),
            local_store=(
                local_store
                if local_store is not None
                else FakeRecordStore(kind="local", records=local_records)
            ),
            remote_store=(
                remote_store
                if remote_store is not None
                else FakeRecordStore(kind="remote", records=remote_records)
            ),
            team_store=team_store if team_store is not None else FakeTeamStore(),
            identity=(
                identity
                if identity is not None
                else FakeIdentityProvider(Identity(name="Ada", email="ada@example.com"))
            ),
            documents=documents if documents is not None else FakeDocumentEditor(),
            prompter=prompter if prompter is not None else FakePrompter(),
            time=time if time is not None else FakeTime(),
        )


def safe_cwd() -> tuple[Path | None, str | None]:
    """Get current working directory, detecting if it no longer exists.

    Returns:
        tuple[Path | None, str | None]: (path, error_message)
        - If successful: (Path, None)
        - If directory deleted: (None, error_message)
    """
    try:
        return (Path.cwd(), None)
    except OSError:
        return (None, "Current working directory no longer exists")


def create_context() -> TuckContext:
    """Create production context with real implementations.

    Called at CLI entry point. Exits with status 1 when the working
    directory is gone or the project config is invalid.
    """
    cwd, error_msg = safe_cwd()
    if cwd is None:
        assert error_msg is not None
        user_output(click.style("Error: ", fg="red") + error_msg)
        raise SystemExit(1)

    project_root = discover_project_root(cwd)
    config = load_config(project_root)
    if isinstance(config, ConfigInvalid):
        user_output(click.style("Error: ", fg="red") + config.message)
        raise SystemExit(1)

    return TuckContext.build(
        cwd=cwd,
        project_root=project_root,
        config=config,
        local_store=JsonRecordStore(kind="local", filename=config.local_file),
        remote_store=JsonRecordStore(kind="remote", filename=config.remote_file),
        team_store=JsonTeamStore(filename=config.team_file),
        identity=GitConfigIdentityProvider(),
        documents=FileDocumentEditor(),
        prompter=ClickPrompter(),
        time=RealTime(),
    )
