"""Thin wrappers around the git executable."""

from .runner import GitRunner, GitResult
from .repository import Repository, discover_repository
from .config import ConfigScope, ConfigEntry, list_config, parse_config_list

__all__ = [
    "GitRunner",
    "GitResult",
    "Repository",
    "discover_repository",
    "ConfigScope",
    "ConfigEntry",
    "list_config",
    "parse_config_list",
]
