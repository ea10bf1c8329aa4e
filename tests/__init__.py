"""
Test suite for sconf.

Tests are organized to mirror the package:

- core/: schema, persistence, events, options, coercion and the store
- cli/: the Typer command-line interface
- utils/: logging configuration
"""
