"""Gateways to the outside world (filesystem, git, terminal, clock)."""
