"""Command-line interface for sconf."""
