"""Team roster subcommands."""
