"""
Error types for speckit.

Every error's string form is the message shown to the user verbatim,
so callers can catch CommandError and render str(e).
"""

from __future__ import annotations


class CommandError(Exception):
    """Base class for all command loading and dispatch errors."""

    pass


class CommandNotFoundError(CommandError):
    """Raised when a requested command is not in the loaded definitions."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Command not found: /{name}")


class MissingArgumentError(CommandError):
    """Raised when a command requiring input is run without any."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Missing argument for command: /{name}")


class PrerequisiteFileNotFoundError(CommandError):
    """Raised when a file or directory a command source needs does not exist."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Prerequisite file not found: {path}")


class SchemaError(CommandError):
    """Raised when a command definition is malformed or fails validation."""

    def __init__(self, name: str, details: str) -> None:
        self.name = name
        self.details = details
        super().__init__(f"Failed to parse TOML file: for command '{name}': {details}")


class CommandIOError(CommandError):
    """Raised when a command source cannot be read."""

    def __init__(self, details: str) -> None:
        self.details = details
        super().__init__(f"I/O Error: {details}")


class WorktreeRequiredError(CommandError):
    """Raised by the host adapter when no worktree is active."""

    def __init__(self) -> None:
        super().__init__("This command requires an active worktree.")
