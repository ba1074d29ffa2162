"""CLI commands for projournal.

This package provides the command-line interface: project
initialization, adding entries and viewing journals.
"""

from projournal.cli.main import cli, main

__all__ = ["cli", "main"]
