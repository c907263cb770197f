"""
Shared constants for speckit.

This module provides a single source of truth for the placeholder
tokens and default command policy used across the package.
"""

# Placeholder tokens
ARGUMENTS_PLACEHOLDER = "$ARGUMENTS"
"""Replaced with the user-supplied argument string."""

PROJECT_ROOT_PLACEHOLDER = "$PROJECT_ROOT"
"""Replaced with the project root path of the active worktree."""

# Command policy
DEFAULT_REQUIRED_ARGUMENT_COMMANDS: tuple[str, ...] = ("specify", "constitution")
"""Commands that fail when invoked with an empty argument string."""

BUNDLED_COMMAND_NAMES: tuple[str, ...] = (
    "analyze",
    "clarify",
    "constitution",
    "context",
    "implement",
    "plan",
    "specify",
    "tasks",
)
"""Commands shipped as TOML assets inside the package."""

COMMAND_FILE_SUFFIX = ".toml"
"""File extension for command definition files."""
