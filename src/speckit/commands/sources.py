"""
Raw command sources.

Command definitions are read from (in priority order):
1. Bundled assets shipped with the package (lowest)
2. Extra directories from configuration, in the order given

Later sources override earlier ones by command name. Sources only
read text; parsing and validation happen in the loader.
"""

from __future__ import annotations

import collections.abc as _abc
import logging as _logging
import pathlib as _pathlib

import speckit.constants as constants
import speckit.errors as errors

_logger = _logging.getLogger(__name__)


def get_bundled_commands_path() -> _pathlib.Path:
    """Get the path to the bundled command assets."""
    return _pathlib.Path(__file__).parent.parent / "assets" / "commands"


def _read_text(path: _pathlib.Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise errors.CommandIOError(f"cannot decode {path}: {e}") from e
    except OSError as e:
        raise errors.CommandIOError(f"cannot read {path}: {e}") from e


def read_command_directory(directory: _pathlib.Path) -> dict[str, str]:
    """
    Read every command file in a directory.

    Args:
        directory: Directory containing <name>.toml files.

    Returns:
        Dict mapping command name (file stem) to raw TOML text.

    Raises:
        PrerequisiteFileNotFoundError: If the directory does not exist.
        CommandIOError: If a file cannot be read.
    """
    if not directory.is_dir():
        raise errors.PrerequisiteFileNotFoundError(str(directory))

    command_files: dict[str, str] = {}
    for path in sorted(directory.glob(f"*{constants.COMMAND_FILE_SUFFIX}")):
        if not path.is_file():
            continue
        command_files[path.stem] = _read_text(path)

    _logger.debug("Read %d command files from %s", len(command_files), directory)
    return command_files


def read_bundled_commands() -> dict[str, str]:
    """
    Read the command definitions shipped with the package.

    Raises:
        PrerequisiteFileNotFoundError: If a bundled asset is missing
            (possible installation problem).
    """
    bundled_dir = get_bundled_commands_path()
    command_files = read_command_directory(bundled_dir)

    for name in constants.BUNDLED_COMMAND_NAMES:
        if name not in command_files:
            raise errors.PrerequisiteFileNotFoundError(
                str(bundled_dir / f"{name}{constants.COMMAND_FILE_SUFFIX}")
            )

    return command_files


def collect_command_files(
    extra_dirs: _abc.Iterable[_pathlib.Path] = (),
    *,
    include_bundled: bool = True,
) -> dict[str, str]:
    """
    Gather raw command files from all sources.

    Args:
        extra_dirs: Additional directories, lowest priority first.
        include_bundled: Whether to start from the bundled commands.

    Returns:
        Dict mapping command name to raw TOML text.
    """
    command_files: dict[str, str] = read_bundled_commands() if include_bundled else {}

    for directory in extra_dirs:
        for name, content in read_command_directory(directory).items():
            if name in command_files:
                _logger.warning("Command /%s overridden by %s", name, directory)
            command_files[name] = content

    return command_files
