"""tuck CLI entry point.

This package provides a Click-based CLI for detaching TODO comments from
source files into local (personal) or remote (team-shared) records, and
reattaching them later. See `tuck --help` for details.
"""
