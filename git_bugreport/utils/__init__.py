"""Utility modules for git-bugreport."""

from .errors import (
    BugreportError,
    SettingsError,
    GitCommandError,
    ReportWriteError,
)
from .log import setup_logging

__all__ = [
    "BugreportError",
    "SettingsError",
    "GitCommandError",
    "ReportWriteError",
    "setup_logging",
]
