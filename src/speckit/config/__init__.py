"""
Configuration module for speckit.

Uses pydantic-settings for environment variable loading.
"""

from speckit.config.settings import (
    ProjectRootTooWideError,
    Settings,
    find_git_root,
    find_project_root,
)
from speckit.config.sources import ConfigFileError

__all__ = [
    "ConfigFileError",
    "ProjectRootTooWideError",
    "Settings",
    "find_git_root",
    "find_project_root",
]
