"""Base class and shared context for report collectors."""

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from git_bugreport.git.repository import Repository
from git_bugreport.git.runner import GitRunner
from git_bugreport.settings import BugreportSettings


@dataclass
class CollectionContext:
    """Everything a collector may consult.

    ``repository`` is None when the command runs outside a repository.
    """

    runner: GitRunner
    repository: Optional[Repository] = None
    settings: BugreportSettings = field(default_factory=BugreportSettings)
    environ: Mapping[str, str] = field(default_factory=lambda: dict(os.environ))


class Collector:
    """Base class for a report section producer.

    Subclasses set ``title`` and implement ``collect``, which returns the
    section body. Expected failures belong in the body as text, not in an
    exception.
    """

    title = ""

    def collect(self, context: CollectionContext) -> str:
        """Gather this section's information and render it."""
        raise NotImplementedError("Subclasses must implement this method")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(title={self.title!r})"
