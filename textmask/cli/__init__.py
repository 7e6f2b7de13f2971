"""Command-line interface for textmask."""
