"""
Slash command definitions parsed from TOML.

Each command is defined by a small TOML document with a description
and a prompt template. The template may contain the $ARGUMENTS and
$PROJECT_ROOT placeholders, which are replaced literally at dispatch.
"""

from __future__ import annotations

import collections.abc as _abc
import dataclasses as _dataclasses
import logging as _logging
import tomllib as _tomllib
import types as _types
import typing as _typing

import pydantic as _pydantic

import speckit.constants as constants
import speckit.errors as errors

_logger = _logging.getLogger(__name__)


class CommandDefinition(_pydantic.BaseModel):
    """
    Schema for a command's TOML file.

    Required fields:
    - description: Short summary shown by the host
    - prompt: Template sent to the assistant

    Unknown keys are ignored.
    """

    model_config = _pydantic.ConfigDict(extra="ignore", frozen=True)

    description: _pydantic.StrictStr = _pydantic.Field(
        ...,
        description="Brief, user-facing description of the command",
    )

    prompt: _pydantic.StrictStr = _pydantic.Field(
        ...,
        description="Prompt template (may contain $ARGUMENTS, $PROJECT_ROOT)",
    )


@_dataclasses.dataclass(frozen=True)
class Command:
    """
    A loaded slash command ready for dispatch.

    requires_argument is decided at load time from the configured
    policy, so the policy always agrees with the loaded definitions.
    """

    name: str
    """Command name (what the user types after /)."""

    definition: CommandDefinition
    """Validated TOML content."""

    requires_argument: bool = False
    """Whether an empty argument string is rejected."""

    @property
    def description(self) -> str:
        """Command description from the definition."""
        return self.definition.description

    @property
    def prompt(self) -> str:
        """Raw prompt template from the definition."""
        return self.definition.prompt

    def render(self, args: str, project_root: str) -> str:
        """
        Substitute placeholders in the prompt template.

        Arguments are substituted first, then the project root. Both
        replacements are literal and cover every occurrence.

        Args:
            args: Argument string, inserted verbatim.
            project_root: Project root path.

        Returns:
            The processed prompt.
        """
        result = self.prompt.replace(constants.ARGUMENTS_PLACEHOLDER, args)
        return result.replace(constants.PROJECT_ROOT_PLACEHOLDER, project_root)

    def to_dict(self) -> dict[str, _typing.Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "description": self.description,
            "prompt": self.prompt,
            "requires_argument": self.requires_argument,
        }


def parse_command_toml(name: str, content: str) -> CommandDefinition:
    """
    Parse the TOML content of a single command.

    Args:
        name: Command name, used in error messages.
        content: Raw TOML text.

    Returns:
        Validated CommandDefinition.

    Raises:
        SchemaError: If the TOML is malformed or does not match the schema.
    """
    try:
        data = _tomllib.loads(content)
        return CommandDefinition.model_validate(data)
    except _tomllib.TOMLDecodeError as e:
        raise errors.SchemaError(name, f"invalid TOML: {e}") from e
    except _pydantic.ValidationError as e:
        raise errors.SchemaError(name, str(e)) from e


def load_commands(
    command_files: _abc.Mapping[str, str],
    required_arguments: _abc.Iterable[str] = constants.DEFAULT_REQUIRED_ARGUMENT_COMMANDS,
) -> _abc.Mapping[str, Command]:
    """
    Parse a collection of command definitions into Command records.

    Loading is all-or-nothing: the first invalid entry aborts the batch
    and no map is returned.

    Args:
        command_files: Command name -> TOML content.
        required_arguments: Names of commands that need a non-empty argument.

    Returns:
        Read-only mapping of command name to Command.

    Raises:
        SchemaError: If any entry fails to parse.
    """
    required = frozenset(required_arguments)
    commands: dict[str, Command] = {}

    for name, content in command_files.items():
        definition = parse_command_toml(name, content)
        commands[name] = Command(
            name=name,
            definition=definition,
            requires_argument=name in required,
        )
        _logger.debug("Loaded command /%s (requires_argument=%s)", name, name in required)

    _logger.info("Loaded %d command definitions", len(commands))
    return _types.MappingProxyType(commands)
