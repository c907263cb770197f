"""
Host adapter for the speckit slash commands.

The extension loads all command definitions once at startup and then
serves slash command invocations from the host editor. Each invocation
joins the argument tokens, checks that a worktree is active, and
dispatches to the command registry with the worktree's root path as the
project root.
"""

from __future__ import annotations

import collections.abc as _abc
import dataclasses as _dataclasses
import logging as _logging
import os as _os
import pathlib as _pathlib
import typing as _typing

import speckit.commands as commands
import speckit.config as config
import speckit.errors as errors

_logger = _logging.getLogger(__name__)


class Worktree(_typing.Protocol):
    """The host's view of the open project."""

    def root_path(self) -> str:
        """Absolute path of the project root."""
        ...


@_dataclasses.dataclass(frozen=True)
class LocalWorktree:
    """Worktree backed by a local directory."""

    path: _pathlib.Path

    def root_path(self) -> str:
        return _os.fspath(self.path)


@_dataclasses.dataclass
class SlashCommandOutput:
    """Result of a slash command, forwarded by the host to the assistant."""

    text: str
    """Processed prompt."""

    sections: list[dict[str, _typing.Any]] = _dataclasses.field(default_factory=list)
    """Optional labelled ranges of text (unused by speckit commands)."""


class SpecKitExtension:
    """
    The slash command extension.

    Holds the registry of commands loaded at startup. The registry is
    never modified afterwards.
    """

    def __init__(self, registry: commands.CommandRegistry) -> None:
        self._registry = registry

    @classmethod
    def new(cls, settings: config.Settings | None = None) -> SpecKitExtension:
        """
        Load every configured command definition and build the extension.

        The extension cannot work without its definitions, so any load
        failure propagates to the caller.

        Args:
            settings: Settings to use. Defaults to Settings().

        Raises:
            CommandError: If a source cannot be read or a definition is invalid.
        """
        if settings is None:
            settings = config.Settings()

        command_files = commands.collect_command_files(
            settings.extra_command_dirs,
            include_bundled=settings.commands.include_bundled,
        )
        registry = commands.CommandRegistry.from_files(
            command_files,
            settings.required_arguments,
        )
        _logger.info("speckit extension ready with %d commands", len(registry))
        return cls(registry)

    @property
    def registry(self) -> commands.CommandRegistry:
        """The loaded command registry."""
        return self._registry

    def run_slash_command(
        self,
        command_name: str,
        args: _abc.Sequence[str],
        worktree: Worktree | None,
    ) -> SlashCommandOutput:
        """
        Run a slash command invoked by the user.

        Args:
            command_name: Name of the invoked command (without the slash).
            args: Argument tokens; joined with single spaces.
            worktree: Active worktree, or None if no project is open.

        Returns:
            SlashCommandOutput with the processed prompt.

        Raises:
            WorktreeRequiredError: If no worktree is active.
            CommandNotFoundError: If the command is unknown.
            MissingArgumentError: If a required argument is missing.
        """
        args_str = " ".join(args)

        if worktree is None:
            raise errors.WorktreeRequiredError()

        prompt = self._registry.dispatch(command_name, args_str, worktree.root_path)
        return SlashCommandOutput(text=prompt)
