"""Command-line tools for brbrbr."""
