"""
speckit - spec-driven development slash commands

Loads a fixed set of slash command definitions and turns invocations
into prompts for an AI assistant.
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml - read it and parse into tuple (primary representation)
_raw_version = _metadata.version("speckit")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)
__author__ = "speckit Contributors"

from speckit.commands import Command, CommandRegistry, handle_command, load_commands  # noqa: E402
from speckit.config import Settings  # noqa: E402
from speckit.errors import (  # noqa: E402
    CommandError,
    CommandIOError,
    CommandNotFoundError,
    MissingArgumentError,
    PrerequisiteFileNotFoundError,
    SchemaError,
    WorktreeRequiredError,
)
from speckit.extension import LocalWorktree, SlashCommandOutput, SpecKitExtension  # noqa: E402

__all__ = [
    "__version__",
    "__version_info__",
    "Command",
    "CommandError",
    "CommandIOError",
    "CommandNotFoundError",
    "CommandRegistry",
    "LocalWorktree",
    "MissingArgumentError",
    "PrerequisiteFileNotFoundError",
    "SchemaError",
    "Settings",
    "SlashCommandOutput",
    "SpecKitExtension",
    "WorktreeRequiredError",
    "handle_command",
    "load_commands",
]
