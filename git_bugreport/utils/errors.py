"""Error hierarchy for git-bugreport.

Only ReportWriteError is fatal to a run. Everything else is caught by the
collector that hit it and rendered as a line inside the report.
"""

from pathlib import Path
from typing import Optional, Sequence


class BugreportError(Exception):
    """Base exception for all git-bugreport errors."""

    pass


class SettingsError(BugreportError):
    """Raised when settings read from the environment are invalid."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class GitCommandError(BugreportError):
    """Raised when a git subprocess is missing, fails or times out."""

    def __init__(
        self,
        message: str,
        command: Sequence[str] = (),
        returncode: Optional[int] = None,
        stderr: str = "",
    ):
        super().__init__(message)
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr

    @property
    def command_line(self) -> str:
        """Command as a single shell-like string."""
        return " ".join(self.command)


class ReportWriteError(BugreportError):
    """Raised when the report file cannot be written."""

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path
