"""System and version information.

Each query degrades to a line describing what went wrong, so the section is
always produced.
"""

import logging
import os
import platform
from typing import List

from git_bugreport import __version__
from git_bugreport.utils.errors import GitCommandError

from .base import CollectionContext, Collector

logger = logging.getLogger(__name__)

HTTP_HELPER = "remote-https"


def git_version_info(context: CollectionContext) -> str:
    """``git version --build-options`` output."""
    try:
        result = context.runner.run("version", "--build-options")
    except GitCommandError as e:
        logger.warning(f"{e.command_line} failed: {e}")
        return f"'git version --build-options' failed: {e}"
    return result.stdout.rstrip("\n")


def uname_info() -> str:
    try:
        info = os.uname()
    except AttributeError:
        return "uname() not available on this platform"
    except OSError as e:
        return f"uname() failed with code {e.errno}"
    return (
        f"uname: {info.sysname} {info.nodename} {info.release} "
        f"{info.version} {info.machine}"
    )


def libc_info() -> str:
    name, version = platform.libc_ver()
    if not name:
        return "libc info: no libc information available"
    return f"libc info: {name}: {version}"


def shell_info(context: CollectionContext) -> str:
    shell = context.environ.get("SHELL")
    return f"$SHELL (typically, interactive shell): {shell if shell is not None else '<unset>'}"


def http_helper_info(context: CollectionContext) -> str:
    """Build options of the HTTP transport helper, or why they are missing."""
    command = f"'git-{HTTP_HELPER} --build-options'"
    try:
        result = context.runner.run(
            HTTP_HELPER,
            "--build-options",
            timeout=context.settings.helper_timeout,
        )
    except GitCommandError as e:
        logger.debug(f"{e.command_line} failed: {e}")
        return f"{command} not supported"
    return f"git-{HTTP_HELPER} --build-options:\n{result.stdout.rstrip()}"


class SystemInfoCollector(Collector):
    """Tool, git, OS, libc and shell identification."""

    title = "System Info"

    def collect(self, context: CollectionContext) -> str:
        lines: List[str] = [
            f"git-bugreport version: {__version__}",
            "git version:",
            git_version_info(context),
            uname_info(),
            libc_info(),
            shell_info(context),
            http_helper_info(context),
        ]
        return "\n".join(lines) + "\n"
