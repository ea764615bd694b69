"""Project configuration for tuck.

Read from `<project_root>/.tuck/config.toml` when present:

    [storage]
    local_file = ".localtodos.json"
    remote_file = ".remotetodos.json"
    team_file = ".todoteam.json"

    [cache]
    ttl_seconds = 2.0

    [gitignore]
    manage = true
"""

import tomllib
from dataclasses import dataclass
from pathlib import Path

from tuck.core.cache import DEFAULT_TTL_SECONDS

CONFIG_DIR_NAME = ".tuck"
CONFIG_FILE_NAME = "config.toml"

DEFAULT_LOCAL_FILE = ".localtodos.json"
DEFAULT_REMOTE_FILE = ".remotetodos.json"
DEFAULT_TEAM_FILE = ".todoteam.json"


@dataclass(frozen=True)
class TuckConfig:
    """In-memory representation of `.tuck/config.toml`."""

    local_file: str
    remote_file: str
    team_file: str
    cache_ttl_seconds: float
    manage_gitignore: bool

    @staticmethod
    def default() -> "TuckConfig":
        return TuckConfig(
            local_file=DEFAULT_LOCAL_FILE,
            remote_file=DEFAULT_REMOTE_FILE,
            team_file=DEFAULT_TEAM_FILE,
            cache_ttl_seconds=DEFAULT_TTL_SECONDS,
            manage_gitignore=True,
        )


@dataclass(frozen=True)
class ConfigInvalid:
    """The config file exists but cannot be read or parsed. Implements NonIdealState."""

    path: str
    message: str

    @property
    def error_type(self) -> str:
        return "config-invalid"


def config_path(project_root: Path) -> Path:
    return project_root / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def load_config(project_root: Path) -> TuckConfig | ConfigInvalid:
    """Load config.toml for a project if present; otherwise return defaults.

    Args:
        project_root: Project root directory

    Returns:
        TuckConfig with parsed values (defaults for missing keys), or
        ConfigInvalid if the file is unreadable, malformed or mistyped
    """
    cfg_path = config_path(project_root)
    if not cfg_path.exists():
        return TuckConfig.default()

    try:
        data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as e:
        return ConfigInvalid(path=str(cfg_path), message=f"Invalid config {cfg_path}: {e}")

    defaults = TuckConfig.default()
    storage = data.get("storage", {})
    cache = data.get("cache", {})
    gitignore = data.get("gitignore", {})
    if not all(isinstance(section, dict) for section in (storage, cache, gitignore)):
        return ConfigInvalid(
            path=str(cfg_path),
            message=f"Invalid config {cfg_path}: [storage], [cache] and [gitignore] must be tables",
        )

    ttl = cache.get("ttl_seconds", defaults.cache_ttl_seconds)
    if isinstance(ttl, bool) or not isinstance(ttl, int | float) or ttl < 0:
        return ConfigInvalid(
            path=str(cfg_path),
            message=f"Invalid config {cfg_path}: cache.ttl_seconds must be a non-negative number",
        )
    manage = gitignore.get("manage", defaults.manage_gitignore)
    if not isinstance(manage, bool):
        return ConfigInvalid(
            path=str(cfg_path),
            message=f"Invalid config {cfg_path}: gitignore.manage must be true or false",
        )

    return TuckConfig(
        local_file=str(storage.get("local_file", defaults.local_file)),
        remote_file=str(storage.get("remote_file", defaults.remote_file)),
        team_file=str(storage.get("team_file", defaults.team_file)),
        cache_ttl_seconds=float(ttl),
        manage_gitignore=manage,
    )
