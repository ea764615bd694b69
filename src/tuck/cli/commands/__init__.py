"""tuck subcommands."""
