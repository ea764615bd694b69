"""Pure business logic for the init command: config content and gitignore entries."""

import tomlkit

from tuck.core.config import TuckConfig


def build_config_toml(config: TuckConfig) -> str:
    """Build config.toml content using tomlkit.

    Returns:
        TOML content as a string
    """
    doc = tomlkit.document()
    doc.add(tomlkit.comment("tuck config for this project"))
    doc.add(tomlkit.nl())

    storage = tomlkit.table()
    storage.add(tomlkit.comment(" Record documents, relative to the project root"))
    storage["local_file"] = config.local_file
    storage["remote_file"] = config.remote_file
    storage["team_file"] = config.team_file
    doc["storage"] = storage

    cache = tomlkit.table()
    cache.add(tomlkit.comment(" How long a loaded store is reused between reads"))
    cache["ttl_seconds"] = config.cache_ttl_seconds
    doc["cache"] = cache

    gitignore = tomlkit.table()
    gitignore.add(tomlkit.comment(" Keep local records and the team list out of version control"))
    gitignore["manage"] = config.manage_gitignore
    doc["gitignore"] = gitignore

    return tomlkit.dumps(doc)


def has_gitignore_entry(content: str, entry: str) -> bool:
    """Check whether a gitignore already covers `entry` (as-is or as `*entry`)."""
    return entry in content or f"*{entry}" in content


def add_gitignore_entry(content: str, entry: str) -> str:
    """Add an entry to gitignore content if not already present.

    Example:
        >>> add_gitignore_entry("*.pyc\\n", ".localtodos.json")
        '*.pyc\\n.localtodos.json\\n'
    """
    if has_gitignore_entry(content, entry):
        return content

    if content and not content.endswith("\n"):
        content += "\n"
    return content + f"{entry}\n"


def local_only_files(config: TuckConfig) -> tuple[str, ...]:
    """Documents that should never be committed. The remote document is shared."""
    return (config.local_file, config.team_file)
