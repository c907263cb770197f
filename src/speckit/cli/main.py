"""
Main CLI entry point for speckit.

Provides the command-line interface using Click. The CLI plays the
role of the host: it loads the command definitions, supplies the
project root, and prints the resulting prompt or error.
"""

import json as _json
import logging as _logging
import pathlib as _pathlib
import typing as _typing

import click as _click
import pydantic as _pydantic
import yaml as _yaml

import speckit
import speckit.commands as commands
import speckit.config as config
import speckit.errors as errors
import speckit.extension as extension

# Custom Click context settings for better help formatting
CONTEXT_SETTINGS: dict[str, _typing.Any] = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 100,
}

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _configure_logging(level: str) -> None:
    """Send library logging to stderr at the given level."""
    _logging.basicConfig(level=level.upper(), format=_LOG_FORMAT)
    _logging.getLogger("speckit").setLevel(level.upper())


def _fail(message: str, json_output: bool = False) -> _typing.NoReturn:
    """Report an error and exit with status 1."""
    if json_output:
        _click.echo(_json.dumps({"error": message}, indent=2))
    else:
        _click.echo(f"Error: {message}", err=True)
    raise SystemExit(1)


def _load_extension(
    settings: config.Settings,
    json_output: bool = False,
) -> extension.SpecKitExtension:
    """Build the extension, exiting on load failure."""
    try:
        return extension.SpecKitExtension.new(settings)
    except errors.CommandError as e:
        _fail(str(e), json_output)


@_click.group(context_settings=CONTEXT_SETTINGS)
@_click.version_option(speckit.__version__, "-v", "--version", prog_name="speckit")
@_click.option(
    "--verbose",
    is_flag=True,
    help="Enable debug logging",
)
@_click.pass_context
def cli(ctx: _click.Context, verbose: bool) -> None:
    """speckit - spec-driven development slash commands.

    Turns slash command invocations like '/specify a login page' into
    prompts for an AI assistant.
    """
    try:
        settings = config.Settings()
    except (config.ConfigFileError, _pydantic.ValidationError) as e:
        raise _click.ClickException(str(e)) from None

    _configure_logging("debug" if verbose else settings.logging.level)

    # Unknown keys are usually typos; they are kept but have no effect
    for key in settings.collect_all_extra_fields():
        _click.echo(f"Warning: unknown config key '{key}'", err=True)

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


@cli.command(
    name="run",
    context_settings={"ignore_unknown_options": True},
)
@_click.argument("command_name")
@_click.argument("args", nargs=-1, type=_click.UNPROCESSED)
@_click.option(
    "--project-root",
    type=_click.Path(file_okay=False, path_type=_pathlib.Path),
    default=None,
    help="Project root (default: detected from the current directory)",
)
@_click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@_click.pass_context
def run_cmd(
    ctx: _click.Context,
    command_name: str,
    args: tuple[str, ...],
    project_root: _pathlib.Path | None,
    json_output: bool,
) -> None:
    """Run a slash command and print the resulting prompt.

    Examples:
        speckit run specify a new login feature
        speckit run clarify
        speckit run plan --project-root ~/src/app -- --use-postgres
    """
    settings: config.Settings = ctx.obj["settings"]
    ext = _load_extension(settings, json_output)

    if project_root is None:
        try:
            project_root = config.find_project_root(
                allow_wide_root=settings.allow_home_directory
            )
        except config.ProjectRootTooWideError as e:
            _fail(str(e), json_output)

    worktree = extension.LocalWorktree(project_root.resolve())

    try:
        output = ext.run_slash_command(command_name, list(args), worktree)
    except errors.CommandError as e:
        _fail(str(e), json_output)

    if json_output:
        _click.echo(_json.dumps({"command": command_name, "text": output.text}, indent=2))
    else:
        _click.echo(output.text)


@cli.command(name="list")
@_click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@_click.pass_context
def list_cmd(ctx: _click.Context, json_output: bool) -> None:
    """List available slash commands."""
    ext = _load_extension(ctx.obj["settings"], json_output)
    command_list = ext.registry.list_commands()

    if json_output:
        _click.echo(_json.dumps([c.to_dict() for c in command_list], indent=2))
        return

    _click.echo("Available Commands:")
    for command in command_list:
        marker = " (requires argument)" if command.requires_argument else ""
        _click.echo(f"  /{command.name}{marker}: {command.description}")


@cli.command(name="show")
@_click.argument("command_name")
@_click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@_click.pass_context
def show_cmd(ctx: _click.Context, command_name: str, json_output: bool) -> None:
    """Show a command's description and raw prompt template."""
    ext = _load_extension(ctx.obj["settings"], json_output)
    command = ext.registry.get(command_name)
    if command is None:
        _fail(str(errors.CommandNotFoundError(command_name)), json_output)

    if json_output:
        _click.echo(_json.dumps(command.to_dict(), indent=2))
        return

    _click.echo(f"/{command.name}")
    _click.echo(f"  Description: {command.description}")
    _click.echo(f"  Requires argument: {'yes' if command.requires_argument else 'no'}")
    _click.echo("")
    _click.echo(command.prompt)


@cli.command(name="validate")
@_click.argument(
    "directory",
    required=False,
    type=_click.Path(path_type=_pathlib.Path),
)
@_click.pass_context
def validate_cmd(ctx: _click.Context, directory: _pathlib.Path | None) -> None:
    """Check that command definitions load.

    With DIRECTORY, validates the <name>.toml files in it. Without it,
    validates every configured source.
    """
    settings: config.Settings = ctx.obj["settings"]

    try:
        if directory is None:
            command_files = commands.collect_command_files(
                settings.extra_command_dirs,
                include_bundled=settings.commands.include_bundled,
            )
        else:
            command_files = commands.read_command_directory(directory)
        loaded = commands.load_commands(command_files, settings.required_arguments)
    except errors.CommandError as e:
        _fail(str(e))

    _click.echo(f"OK: {len(loaded)} command definitions")


@cli.group(name="config")
def config_cmd() -> None:
    """Configuration commands."""
    pass


@config_cmd.command(name="show")
@_click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@_click.pass_context
def config_show(ctx: _click.Context, as_json: bool) -> None:
    """Show effective configuration from all sources."""
    settings: config.Settings = ctx.obj["settings"]
    full_config = settings.to_dict()

    if as_json:
        _click.echo(_json.dumps(full_config, indent=2))
    else:
        _click.echo(_yaml.dump(full_config, default_flow_style=False, sort_keys=False), nl=False)


def main() -> None:
    """Main entry point with correct program name."""
    cli(prog_name="speckit")


if __name__ == "__main__":
    main()
