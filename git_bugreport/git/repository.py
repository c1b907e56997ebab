"""Repository discovery and hook lookup."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from git_bugreport.utils.errors import GitCommandError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Repository:
    """Locations inside the repository the command was run from."""

    git_dir: Path
    object_dir: Path
    hooks_dir: Path

    def find_hook(self, name: str) -> Optional[Path]:
        """Return the hook's path if it exists and is executable."""
        path = self.hooks_dir / name
        if path.is_file() and os.access(path, os.X_OK):
            return path
        return None


def discover_repository(runner) -> Optional[Repository]:
    """Find the repository around the runner's working directory.

    Returns:
        Repository, or None when not run from inside a repository
    """
    try:
        result = runner.run(
            "rev-parse", "--git-dir", "--git-path", "objects", "--git-path", "hooks"
        )
    except GitCommandError as e:
        logger.debug(f"Not in a git repository: {e}")
        return None

    lines = result.stdout.splitlines()
    if len(lines) < 3:
        logger.warning(f"Unexpected rev-parse output: {result.stdout!r}")
        return None

    git_dir, object_dir, hooks_dir = lines[:3]
    return Repository(
        git_dir=runner.resolve(git_dir),
        object_dir=runner.resolve(object_dir),
        hooks_dir=runner.resolve(hooks_dir),
    )
