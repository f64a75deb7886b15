"""Command-line interface for termio."""
