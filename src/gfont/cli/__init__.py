"""Command-line interface for gfont.

This module provides the CLI using Typer with rich output for
user-friendly errors and summaries on stderr.

Sub-commands:
- download: Fetch font-face CSS from the Google Fonts API
- parse: Turn font-face CSS into JSON
- filter: List distinct urls, families, formats, styles or weights
- merge: Combine several JSON documents
- css: Render JSON back to CSS, optionally consolidated
"""

from gfont.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
