"""Command-line interface for vectorpath.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Commands:
- decode: Print the primitives of one path-data string
- inspect: Parse every path of an SVG file and summarize
"""

from vectorpath.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
