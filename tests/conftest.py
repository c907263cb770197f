"""
Shared pytest fixtures for speckit tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import pathlib as _pathlib
import typing as _typing

import click.testing as _click_testing
import pytest as _pytest

import speckit.commands as commands
import speckit.extension as extension

# Environment keys that should be cleared for isolated tests
ENV_KEYS_TO_CLEAR = [
    "SPECKIT_ENV_FILE",
    "SPECKIT_CONFIG_DIR",
    "SPECKIT_ALLOW_HOME_DIRECTORY",
    "SPECKIT_COMMANDS__REQUIRED_ARGUMENTS",
    "SPECKIT_COMMANDS__EXTRA_DIRS",
    "SPECKIT_COMMANDS__INCLUDE_BUNDLED",
    "SPECKIT_LOGGING__LEVEL",
]

SPECIFY_TOML = """
description = "Create a new feature specification."
prompt = "Generate a spec for: $ARGUMENTS"
"""

CLARIFY_TOML = """
description = "Clarify the spec."
prompt = "Identify underspecified areas in $PROJECT_ROOT"
"""


@_pytest.fixture(autouse=True)
def isolated_env(
    tmp_path: _pathlib.Path,
    monkeypatch: _pytest.MonkeyPatch,
) -> _typing.Iterator[_pathlib.Path]:
    """
    Isolate every test from the user's speckit environment.

    Clears SPECKIT_* variables, points the user config directory at an
    empty temporary directory and runs the test from a scratch working
    directory, so project-root detection never sees the real checkout.
    """
    for key in ENV_KEYS_TO_CLEAR:
        monkeypatch.delenv(key, raising=False)

    config_dir = tmp_path / "user-config"
    config_dir.mkdir()
    monkeypatch.setenv("SPECKIT_CONFIG_DIR", str(config_dir))

    work_dir = tmp_path / "cwd"
    work_dir.mkdir()
    monkeypatch.chdir(work_dir)
    yield config_dir


@_pytest.fixture
def command_files() -> dict[str, str]:
    """Raw TOML for a small set of commands."""
    return {
        "specify": SPECIFY_TOML,
        "clarify": CLARIFY_TOML,
    }


@_pytest.fixture
def registry(command_files: dict[str, str]) -> commands.CommandRegistry:
    """Registry loaded from the command_files fixture."""
    return commands.CommandRegistry.from_files(command_files)


@_pytest.fixture
def project_dir(tmp_path: _pathlib.Path) -> _pathlib.Path:
    """An empty project directory."""
    path = tmp_path / "project"
    path.mkdir()
    return path


@_pytest.fixture
def worktree(project_dir: _pathlib.Path) -> extension.LocalWorktree:
    """Worktree rooted at project_dir."""
    return extension.LocalWorktree(project_dir)


@_pytest.fixture
def commands_dir(tmp_path: _pathlib.Path) -> _pathlib.Path:
    """Directory with one extra command definition."""
    path = tmp_path / "commands"
    path.mkdir()
    (path / "review.toml").write_text(
        'description = "Review"\nprompt = "Review $ARGUMENTS in $PROJECT_ROOT"\n',
        encoding="utf-8",
    )
    return path


@_pytest.fixture
def cli_runner() -> _click_testing.CliRunner:
    """Click runner for invoking the CLI."""
    return _click_testing.CliRunner()
