"""Write the report to disk and open it for editing."""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

import click

from git_bugreport.utils.errors import GitCommandError, ReportWriteError

from .models import Report

logger = logging.getLogger(__name__)

REPORT_PREFIX = "git-bugreport"


def report_path(
    output_dir: Optional[Union[str, Path]] = None,
    now: Optional[datetime] = None,
) -> Path:
    """Path of the report file: ``[<output_dir>/]git-bugreport-<YYYY-MM-DD>.txt``.

    The date is taken in UTC; a naive ``now`` is assumed to already be UTC.
    Two runs on the same day share a path, so the later one overwrites.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    filename = f"{REPORT_PREFIX}-{now.astimezone(timezone.utc):%Y-%m-%d}.txt"
    if output_dir:
        return Path(output_dir) / filename
    return Path(filename)


def write_report(report: Report, path: Path) -> Path:
    """Write the rendered report, truncating any existing file.

    Raises:
        ReportWriteError: If the file cannot be written
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(report.render())
    except OSError as e:
        raise ReportWriteError(
            f"unable to write to '{path}': {e.strerror or e}", path
        ) from e

    logger.debug(f"Saved report to {path}")
    return path


def resolve_editor(runner) -> Optional[str]:
    """The editor git itself would use, or None to let click choose."""
    try:
        editor = runner.run("var", "GIT_EDITOR").stdout.strip()
    except GitCommandError as e:
        logger.debug(f"git var GIT_EDITOR failed: {e}")
        return None
    return editor or None


def launch_editor(path: Path, runner) -> bool:
    """Open ``path`` in the user's editor and wait for it to exit.

    Returns:
        True if the editor ran successfully
    """
    editor = resolve_editor(runner)
    try:
        click.edit(filename=str(path), editor=editor)
    except click.ClickException as e:
        logger.warning(f"Could not launch editor: {e.format_message()}")
        return False
    return True
