"""Shared fixtures."""

from pathlib import Path

import pytest

from git_bugreport.git.runner import GitResult
from git_bugreport.utils.errors import GitCommandError


class FakeRunner:
    """Stands in for GitRunner; answers from a table of canned outputs.

    Keys are argument tuples. A value is either stdout text or an exception
    to raise. Unknown commands fail like git does for an unknown command.
    """

    def __init__(self, responses=None, cwd=None):
        self.responses = dict(responses or {})
        self.cwd = cwd
        self.calls = []

    def run(self, *args, timeout=None):
        self.calls.append((args, timeout))
        response = self.responses.get(args)
        if response is None:
            raise GitCommandError(
                f"git: '{args[0]}' is not a git command",
                command=["git", *args],
                returncode=1,
            )
        if isinstance(response, Exception):
            raise response
        return GitResult(args=["git", *args], returncode=0, stdout=response)

    def resolve(self, path):
        return Path(self.cwd or ".") / path


@pytest.fixture
def make_runner():
    """Factory for FakeRunner instances."""
    return FakeRunner


@pytest.fixture
def object_dir(tmp_path):
    """An empty object directory."""
    path = tmp_path / "objects"
    path.mkdir()
    return path
