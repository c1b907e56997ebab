"""Safelisted configuration."""

import logging

from git_bugreport.git.config import list_config
from git_bugreport.utils.errors import GitCommandError

from .base import CollectionContext, Collector
from .safelist import CONFIG_SAFELIST, KeySetFilter

logger = logging.getLogger(__name__)


class SafelistedConfigCollector(Collector):
    """Every config entry whose key is on the safelist, in git's order.

    Keys outside the safelist are dropped whatever their value; nothing else
    filters entries.
    """

    title = "Safelisted Config Info"

    def __init__(self, safelist=CONFIG_SAFELIST):
        self.safelist = tuple(safelist)

    def collect(self, context: CollectionContext) -> str:
        try:
            entries = list_config(context.runner)
        except GitCommandError as e:
            logger.warning(f"Could not list configuration ({e.command_line}): {e}")
            return f"could not read configuration: {e}\n"

        with KeySetFilter.from_keys(self.safelist) as key_filter:
            kept = [entry for entry in entries if entry.key in key_filter]

        logger.debug(f"Kept {len(kept)} of {len(entries)} config entries")
        return "".join(f"{entry.render()}\n" for entry in kept)
