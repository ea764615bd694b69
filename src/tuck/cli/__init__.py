"""Click command-line interface for tuck."""
