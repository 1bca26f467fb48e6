"""CLI module for rebench.

This module provides the command-line interface using Typer.
"""

from __future__ import annotations

from rebench.cli.main import app

__all__ = ["app"]
