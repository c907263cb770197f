"""Tests for raw command sources."""

import pathlib as _pathlib

import pytest as _pytest

import speckit.commands.command as command
import speckit.commands.sources as sources
import speckit.constants as constants
import speckit.errors as errors


class TestBundledCommands:
    """Tests for the command assets shipped with the package."""

    def test_bundled_path_exists(self) -> None:
        path = sources.get_bundled_commands_path()
        assert path.is_dir()
        assert path.name == "commands"

    def test_reads_all_bundled_commands(self) -> None:
        command_files = sources.read_bundled_commands()
        assert sorted(command_files) == sorted(constants.BUNDLED_COMMAND_NAMES)

    def test_bundled_commands_are_valid(self) -> None:
        loaded = command.load_commands(sources.read_bundled_commands())
        assert len(loaded) == len(constants.BUNDLED_COMMAND_NAMES)
        for cmd in loaded.values():
            assert cmd.description
            assert cmd.prompt

    def test_argument_commands_use_arguments_placeholder(self) -> None:
        loaded = command.load_commands(sources.read_bundled_commands())
        for name in constants.DEFAULT_REQUIRED_ARGUMENT_COMMANDS:
            assert constants.ARGUMENTS_PLACEHOLDER in loaded[name].prompt

    def test_every_bundled_command_references_project_root(self) -> None:
        loaded = command.load_commands(sources.read_bundled_commands())
        for cmd in loaded.values():
            assert constants.PROJECT_ROOT_PLACEHOLDER in cmd.prompt, cmd.name


class TestReadCommandDirectory:
    """Tests for read_command_directory."""

    def test_reads_toml_files_by_stem(self, commands_dir: _pathlib.Path) -> None:
        (commands_dir / "notes.txt").write_text("ignored", encoding="utf-8")
        command_files = sources.read_command_directory(commands_dir)
        assert list(command_files) == ["review"]
        assert "Review $ARGUMENTS" in command_files["review"]

    def test_missing_directory(self, tmp_path: _pathlib.Path) -> None:
        missing = tmp_path / "nope"
        with _pytest.raises(errors.PrerequisiteFileNotFoundError) as exc_info:
            sources.read_command_directory(missing)
        assert exc_info.value.path == str(missing)
        assert str(exc_info.value) == f"Prerequisite file not found: {missing}"

    def test_undecodable_file(self, commands_dir: _pathlib.Path) -> None:
        (commands_dir / "binary.toml").write_bytes(b"\xff\xfe\x00bad")
        with _pytest.raises(errors.CommandIOError, match="I/O Error"):
            sources.read_command_directory(commands_dir)


class TestCollectCommandFiles:
    """Tests for collect_command_files."""

    def test_bundled_only(self) -> None:
        command_files = sources.collect_command_files()
        assert set(command_files) == set(constants.BUNDLED_COMMAND_NAMES)

    def test_extra_directory_adds_commands(self, commands_dir: _pathlib.Path) -> None:
        command_files = sources.collect_command_files([commands_dir])
        assert "review" in command_files
        assert "specify" in command_files

    def test_later_directory_overrides(
        self,
        commands_dir: _pathlib.Path,
        tmp_path: _pathlib.Path,
    ) -> None:
        override_dir = tmp_path / "override"
        override_dir.mkdir()
        (override_dir / "specify.toml").write_text(
            'description = "Local"\nprompt = "Local $ARGUMENTS"\n',
            encoding="utf-8",
        )
        command_files = sources.collect_command_files([commands_dir, override_dir])
        assert command_files["specify"].startswith('description = "Local"')

    def test_without_bundled(self, commands_dir: _pathlib.Path) -> None:
        command_files = sources.collect_command_files([commands_dir], include_bundled=False)
        assert list(command_files) == ["review"]
