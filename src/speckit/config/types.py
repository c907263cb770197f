"""Configuration type definitions for speckit settings.

These are the config section types nested within the main Settings
class. All types use `extra="allow"` so unknown fields are preserved;
the CLI reports them via Settings.collect_all_extra_fields().
"""

import typing as _typing

import pydantic as _pydantic

import speckit.constants as constants


class ConfigBase(_pydantic.BaseModel):
    """Base class for all config types."""

    model_config = _pydantic.ConfigDict(extra="allow")

    def get_extra_fields(self) -> dict[str, _typing.Any]:
        """
        Return fields that were provided but not in the schema.

        Unknown fields may indicate typos or outdated config keys.
        """
        return dict(self.model_extra) if self.model_extra else {}

    def collect_all_extra_fields(self, prefix: str = "") -> dict[str, _typing.Any]:
        """
        Recursively collect extra fields from this config and nested configs.

        Returns a flat dict with dotted paths as keys, e.g. {"commands.extra_dir": [...]}.
        """
        result: dict[str, _typing.Any] = {}
        for key, value in self.get_extra_fields().items():
            result[f"{prefix}.{key}" if prefix else key] = value

        for field_name in self.__class__.model_fields:
            value = getattr(self, field_name, None)
            if isinstance(value, ConfigBase):
                child_prefix = f"{prefix}.{field_name}" if prefix else field_name
                result.update(value.collect_all_extra_fields(child_prefix))

        return result


class CommandsConfig(ConfigBase):
    """
    Command loading settings.

    YAML section: commands.*
    """

    required_arguments: list[str] = _pydantic.Field(
        default_factory=lambda: list(constants.DEFAULT_REQUIRED_ARGUMENT_COMMANDS)
    )
    """Commands that must be invoked with a non-empty argument."""

    extra_dirs: list[str] = _pydantic.Field(default_factory=list)
    """Directories of additional <name>.toml definitions (later wins)."""

    include_bundled: bool = True
    """Load the commands shipped with the package."""


class LoggingConfig(ConfigBase):
    """
    Logging settings.

    YAML section: logging.*
    """

    level: _typing.Literal["debug", "info", "warning", "error"] = "warning"
    """Log level."""
