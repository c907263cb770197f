"""
Command registry.

The registry owns the loaded command map for the lifetime of the
process and is the single entry point for dispatch.
"""

from __future__ import annotations

import collections.abc as _abc

import speckit.commands.command as command_module
import speckit.commands.handler as handler
import speckit.constants as constants


class CommandRegistry:
    """
    Read-only collection of loaded commands.

    The map is never mutated after construction, so a registry can be
    shared between concurrent dispatch calls.
    """

    def __init__(self, commands: _abc.Mapping[str, command_module.Command]) -> None:
        """
        Initialize the registry.

        Args:
            commands: Loaded commands (name -> Command).
        """
        self._commands = commands

    @classmethod
    def from_files(
        cls,
        command_files: _abc.Mapping[str, str],
        required_arguments: _abc.Iterable[str] = constants.DEFAULT_REQUIRED_ARGUMENT_COMMANDS,
    ) -> CommandRegistry:
        """
        Load commands from raw TOML content.

        Raises:
            SchemaError: If any definition is invalid.
        """
        return cls(command_module.load_commands(command_files, required_arguments))

    def get(self, name: str) -> command_module.Command | None:
        """Get a command by exact name."""
        return self._commands.get(name)

    def has_command(self, name: str) -> bool:
        """Check if a command exists."""
        return name in self._commands

    def names(self) -> list[str]:
        """Sorted command names."""
        return sorted(self._commands)

    def list_commands(self) -> list[command_module.Command]:
        """All commands, sorted by name."""
        return [self._commands[name] for name in self.names()]

    def __len__(self) -> int:
        return len(self._commands)

    def dispatch(self, name: str, args: str, project_root: handler.ProjectRoot) -> str:
        """
        Dispatch a command invocation.

        See handler.handle_command for the full contract.
        """
        return handler.handle_command(name, args, self._commands, project_root)
