"""Click CLI for git-bugreport.

Collects system, configuration, hook and object store information into
``git-bugreport-<date>.txt`` and opens it in the user's editor. Nothing is
sent anywhere; the user reviews the file and submits it themselves.
"""

import logging
import sys
from pathlib import Path
from typing import NoReturn, Optional

import click
from rich.console import Console
from rich.markup import escape

from git_bugreport import __version__
from git_bugreport.report import (
    build_report,
    create_context,
    launch_editor,
    report_path,
    write_report,
)
from git_bugreport.settings import BugreportSettings
from git_bugreport.utils.errors import ReportWriteError, SettingsError
from git_bugreport.utils.log import setup_logging

console = Console(stderr=True)
logger = logging.getLogger(__name__)

# git's exit status for fatal errors
FATAL_EXIT_CODE = 128


def fatal(message: str) -> NoReturn:
    console.print(f"[red]fatal: {escape(message)}[/]")
    sys.exit(FATAL_EXIT_CODE)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__)
@click.option(
    "-o",
    "--output",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    metavar="<path>",
    help="Specify a destination for the bugreport file",
)
def cli(output: Optional[Path]):
    """Collect information for the user to file a bug report."""
    try:
        settings = BugreportSettings.from_env()
    except SettingsError as e:
        fatal(str(e))

    setup_logging(level=settings.log_level)
    logger.debug(f"Settings: {settings!r}")

    context = create_context(settings)
    report = build_report(context)

    path = report_path(output)
    try:
        write_report(report, path)
    except ReportWriteError as e:
        fatal(str(e))

    console.print(f"Created new report at '{escape(str(path))}'.")

    if settings.launch_editor and not launch_editor(path, context.runner):
        console.print(
            f"[yellow]Could not open an editor. Edit '{escape(str(path))}' before sending it.[/]"
        )


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
