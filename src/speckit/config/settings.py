"""
Settings configuration using pydantic-settings.

Loads configuration from:
1. Constructor arguments (highest precedence)
2. Environment variables with SPECKIT_ prefix
3. .env file (if SPECKIT_ENV_FILE points at one)
4. Layered YAML config files:
   - Project config: .speckit/config.yaml (highest)
   - User config: ~/.config/speckit/config.yaml

Nested config uses double underscore delimiter:
  SPECKIT_LOGGING__LEVEL=debug
  SPECKIT_COMMANDS__EXTRA_DIRS='["./commands"]'
"""

import os as _os
import pathlib as _pathlib
import subprocess as _subprocess
import typing as _typing

import pydantic as _pydantic
import pydantic_settings as _pydantic_settings

import speckit.config.sources as sources
import speckit.config.types as types


def _get_env_file() -> str | None:
    """Determine which .env file to load.

    Only SPECKIT_ENV_FILE is honoured; if it is set but missing, no
    .env is loaded rather than falling back silently.
    """
    if env_file := _os.environ.get("SPECKIT_ENV_FILE"):
        if _pathlib.Path(env_file).exists():
            return env_file
    return None


class ProjectRootTooWideError(Exception):
    """Raised when project root would be an overly broad directory like ~ or /."""

    pass


def find_git_root(start_path: _pathlib.Path | None = None) -> _pathlib.Path | None:
    """Find the git repository root from the given path or current directory."""
    if start_path is None:
        start_path = _pathlib.Path.cwd()

    try:
        result = _subprocess.run(
            ["git", "rev-parse", "--show-toplevel"],
            capture_output=True,
            text=True,
            cwd=start_path,
            timeout=5,
        )
        if result.returncode == 0:
            return _pathlib.Path(result.stdout.strip())
    except (_subprocess.TimeoutExpired, FileNotFoundError, OSError):
        pass
    return None


def _is_overly_wide_root(path: _pathlib.Path) -> bool:
    """Check if a path is too broad to be a project root."""
    resolved = path.resolve()
    home = _pathlib.Path.home().resolve()
    root = _pathlib.Path("/").resolve()
    return resolved in (home, root)


def find_project_root(
    start_path: _pathlib.Path | None = None,
    *,
    allow_wide_root: bool = False,
) -> _pathlib.Path:
    """
    Find the project root directory.

    Tries (in order):
    1. Git repository root
    2. Nearest directory containing a project marker (.speckit, specs, pyproject.toml)
    3. Start directory

    Args:
        start_path: Starting path for search. Defaults to cwd.
        allow_wide_root: If False, raises ProjectRootTooWideError if
            the detected root is ~ or /.

    Raises:
        ProjectRootTooWideError: If root would be too broad and
            allow_wide_root is False.
    """
    if start_path is None:
        start_path = _pathlib.Path.cwd()

    result = find_git_root(start_path)

    if result is None:
        markers = [".speckit", "specs", "pyproject.toml", ".git"]
        current = start_path.resolve()
        while current != current.parent:
            if any((current / marker).exists() for marker in markers):
                result = current
                break
            current = current.parent

    if result is None:
        result = start_path.resolve()

    if not allow_wide_root and _is_overly_wide_root(result):
        raise ProjectRootTooWideError(
            f"Project root '{result}' is too broad for safe operation.\n"
            f"Navigate to a specific project directory, pass --project-root, or set "
            f"SPECKIT_ALLOW_HOME_DIRECTORY=true to override."
        )

    return result


class Settings(_pydantic_settings.BaseSettings):
    """
    speckit configuration settings.

    All settings can be overridden via environment variables with SPECKIT_ prefix.
    For nested config, use double underscore: SPECKIT_LOGGING__LEVEL=debug

    Config precedence (highest to lowest):
    1. Constructor arguments
    2. Environment variables (SPECKIT_*)
    3. .env file
    4. Project config (.speckit/config.yaml)
    5. User config (~/.config/speckit/config.yaml)
    6. Field defaults
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix="SPECKIT_",
        env_file=_get_env_file(),
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="allow",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[_pydantic_settings.BaseSettings],
        init_settings: _pydantic_settings.PydanticBaseSettingsSource,
        env_settings: _pydantic_settings.PydanticBaseSettingsSource,
        dotenv_settings: _pydantic_settings.PydanticBaseSettingsSource,
        file_secret_settings: _pydantic_settings.PydanticBaseSettingsSource,
    ) -> tuple[_pydantic_settings.PydanticBaseSettingsSource, ...]:
        project_root = find_project_root(allow_wide_root=True)

        return (
            init_settings,
            env_settings,
            dotenv_settings,
            sources.YamlLayersSettingsSource(settings_cls, project_root),
            file_secret_settings,
        )

    @classmethod
    def construct_without_dotenv(cls, **kwargs: _typing.Any) -> "Settings":
        """Create Settings from environment variables only, without loading .env file."""
        return cls(_env_file=None, **kwargs)  # type: ignore[call-arg]

    commands: types.CommandsConfig = _pydantic.Field(default_factory=types.CommandsConfig)
    """Command loading settings."""

    logging: types.LoggingConfig = _pydantic.Field(default_factory=types.LoggingConfig)
    """Logging settings."""

    allow_home_directory: bool = _pydantic.Field(
        default=False,
        description="Allow running from overly broad directories like ~ or /",
    )

    @property
    def required_arguments(self) -> list[str]:
        """Commands requiring an argument (alias to commands.required_arguments)."""
        return self.commands.required_arguments

    @property
    def project_root(self) -> _pathlib.Path:
        """Project root detected from the current directory."""
        return find_project_root(allow_wide_root=True)

    @property
    def extra_command_dirs(self) -> list[_pathlib.Path]:
        """
        Extra command directories as expanded paths.

        Relative entries are resolved against the project root, so the
        same config works from any subdirectory of the project.
        """
        dirs = [_pathlib.Path(d).expanduser() for d in self.commands.extra_dirs]
        if all(d.is_absolute() for d in dirs):
            return dirs
        root = self.project_root
        return [d if d.is_absolute() else root / d for d in dirs]

    def get_extra_fields(self) -> dict[str, _typing.Any]:
        """Return top-level fields that were provided but not in the schema."""
        return dict(self.model_extra) if self.model_extra else {}

    def collect_all_extra_fields(self) -> dict[str, _typing.Any]:
        """
        Collect unknown keys from the top level and every config section.

        Returns a flat dict keyed by dotted path, e.g. {"logging.lvl": "debug"}.
        """
        result = self.get_extra_fields()
        for field_name in self.__class__.model_fields:
            value = getattr(self, field_name, None)
            if isinstance(value, types.ConfigBase):
                result.update(value.collect_all_extra_fields(field_name))
        return result

    def to_dict(self) -> dict[str, _typing.Any]:
        """Convert to a plain dict for display."""
        return self.model_dump(mode="json")
