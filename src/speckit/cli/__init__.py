"""
CLI module for speckit.

Provides the command-line interface using Click.
"""

from speckit.cli.main import cli, main

__all__ = ["main", "cli"]
