"""Run git subprocesses and capture their output."""

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from git_bugreport.utils.errors import GitCommandError

logger = logging.getLogger(__name__)


@dataclass
class GitResult:
    """Captured result of a finished git command."""

    args: List[str]
    returncode: int
    stdout: str
    stderr: str = ""


class GitRunner:
    """Invokes the git executable.

    Usage:
        runner = GitRunner()
        version = runner.run("version").stdout
    """

    def __init__(self, executable: str = "git", cwd: Optional[Path] = None):
        """Initialize runner.

        Args:
            executable: git binary name or path
            cwd: Working directory for commands (None for the current one)
        """
        self.executable = executable
        self.cwd = cwd

    def run(self, *args: str, timeout: Optional[float] = None) -> GitResult:
        """Run ``git <args>`` and return its output.

        Raises:
            GitCommandError: If git cannot be started, exits non-zero or
                exceeds ``timeout``
        """
        command = [self.executable, *args]
        logger.debug(f"Running {' '.join(command)}")

        try:
            completed = subprocess.run(
                command,
                cwd=self.cwd,
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                check=False,
                timeout=timeout,
            )
        except FileNotFoundError as e:
            raise GitCommandError(
                f"{self.executable}: command not found", command=command
            ) from e
        except subprocess.TimeoutExpired as e:
            raise GitCommandError(
                f"timed out after {timeout} seconds", command=command
            ) from e
        except OSError as e:
            raise GitCommandError(str(e), command=command) from e

        if completed.returncode != 0:
            stderr = completed.stderr.strip()
            raise GitCommandError(
                stderr or f"exited with code {completed.returncode}",
                command=command,
                returncode=completed.returncode,
                stderr=stderr,
            )

        return GitResult(
            args=command,
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )

    def resolve(self, path: str) -> Path:
        """Resolve a path printed by git against the working directory."""
        return Path(self.cwd or ".") / path
