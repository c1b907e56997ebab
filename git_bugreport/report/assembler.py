"""Run the collectors in order and assemble their sections."""

import logging
import os
from pathlib import Path
from typing import Mapping, Optional, Sequence

from git_bugreport.collectors import CollectionContext, Collector, default_collectors
from git_bugreport.git.repository import discover_repository
from git_bugreport.git.runner import GitRunner
from git_bugreport.settings import BugreportSettings
from git_bugreport.utils.errors import BugreportError

from .models import Report, Section
from .template import BUG_TEMPLATE

logger = logging.getLogger(__name__)


def create_context(
    settings: BugreportSettings,
    cwd: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> CollectionContext:
    """Build the context collectors run against.

    Args:
        settings: Settings for this run
        cwd: Directory to discover the repository from (None for the current one)
        environ: Environment to report from (None for os.environ)
    """
    runner = GitRunner(settings.git_executable, cwd=cwd)
    repository = discover_repository(runner)
    if repository is None:
        logger.info("Not inside a git repository; repository sections will be skipped")
    else:
        logger.info(f"Repository found at {repository.git_dir}")

    return CollectionContext(
        runner=runner,
        repository=repository,
        settings=settings,
        environ=dict(os.environ if environ is None else environ),
    )


def build_report(
    context: CollectionContext,
    collectors: Optional[Sequence[Collector]] = None,
    template: str = BUG_TEMPLATE,
) -> Report:
    """Run each collector once, in order, and return the finished report.

    A collector that raises still gets its section, holding the failure
    reason, so the rest of the report survives.
    """
    if collectors is None:
        collectors = default_collectors()

    sections = []
    for collector in collectors:
        logger.info(f"Collecting {collector.title}")
        try:
            body = collector.collect(context)
        except (BugreportError, OSError, ValueError) as e:
            logger.warning(f"{collector.title} collection failed: {e}")
            body = f"{collector.title} collection failed: {e}\n"
        sections.append(Section(title=collector.title, body=body))

    return Report(template=template, sections=tuple(sections))
