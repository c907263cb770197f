"""
Slash commands for speckit.

Commands are TOML documents with a description and a prompt template.
They are loaded once at startup from:
1. Bundled assets (assets/commands/*.toml)
2. Extra directories listed in configuration

and dispatched by name, with $ARGUMENTS and $PROJECT_ROOT substituted
into the template.
"""

from speckit.commands.command import (
    Command,
    CommandDefinition,
    load_commands,
    parse_command_toml,
)
from speckit.commands.handler import ProjectRoot, handle_command
from speckit.commands.registry import CommandRegistry
from speckit.commands.sources import (
    collect_command_files,
    get_bundled_commands_path,
    read_bundled_commands,
    read_command_directory,
)

__all__ = [
    # Core
    "Command",
    "CommandDefinition",
    "CommandRegistry",
    # Loading
    "load_commands",
    "parse_command_toml",
    # Dispatch
    "ProjectRoot",
    "handle_command",
    # Sources
    "collect_command_files",
    "get_bundled_commands_path",
    "read_bundled_commands",
    "read_command_directory",
]
