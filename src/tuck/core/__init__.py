"""Core TODO record engine: extraction, visibility, conversion, roster."""
