"""
Dispatch of a single slash command invocation.
"""

from __future__ import annotations

import collections.abc as _abc
import logging as _logging
import typing as _typing

import speckit.commands.command as command_module
import speckit.errors as errors

_logger = _logging.getLogger(__name__)

# Either the project root itself or a callable that produces it
ProjectRoot = str | _typing.Callable[[], str]


def _resolve_project_root(project_root: ProjectRoot) -> str:
    if callable(project_root):
        return project_root()
    return project_root


def handle_command(
    name: str,
    args: str,
    commands: _abc.Mapping[str, command_module.Command],
    project_root: ProjectRoot,
) -> str:
    """
    Resolve a command invocation to its final prompt.

    Steps, in order:
    1. Look up the command by exact name.
    2. Reject an empty argument string if the command requires one.
    3. Replace $ARGUMENTS with the argument string.
    4. Replace $PROJECT_ROOT with the project root.

    Args:
        name: Command name (e.g., "specify").
        args: Argument string as typed by the user. Emptiness is checked
            without trimming, so " " counts as an argument.
        commands: Loaded command definitions.
        project_root: Project root path, or a provider returning it. The
            provider is only called once the command has been accepted.

    Returns:
        The processed prompt.

    Raises:
        CommandNotFoundError: If no command has that name.
        MissingArgumentError: If a required argument is missing.
    """
    command = commands.get(name)
    if command is None:
        _logger.debug("Unknown command /%s", name)
        raise errors.CommandNotFoundError(name)

    if command.requires_argument and args == "":
        _logger.debug("Command /%s invoked without required argument", name)
        raise errors.MissingArgumentError(name)

    prompt = command.render(args, _resolve_project_root(project_root))
    _logger.debug("Dispatched /%s (%d chars)", name, len(prompt))
    return prompt
