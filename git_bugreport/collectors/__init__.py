"""Report collectors, one per report section."""

from .base import CollectionContext, Collector
from .config import SafelistedConfigCollector
from .hooks import HOOK_NAMES, HooksCollector
from .objects import (
    AlternatesCollector,
    LooseObjectCollector,
    ObjectInfoCollector,
    PackedObjectCollector,
)
from .safelist import CONFIG_SAFELIST, KeySetFilter
from .system import SystemInfoCollector


def default_collectors():
    """Return the collectors in report order."""
    return [
        SystemInfoCollector(),
        SafelistedConfigCollector(),
        HooksCollector(),
        LooseObjectCollector(),
        PackedObjectCollector(),
        ObjectInfoCollector(),
        AlternatesCollector(),
    ]


__all__ = [
    "CollectionContext",
    "Collector",
    "SystemInfoCollector",
    "SafelistedConfigCollector",
    "HooksCollector",
    "LooseObjectCollector",
    "PackedObjectCollector",
    "ObjectInfoCollector",
    "AlternatesCollector",
    "CONFIG_SAFELIST",
    "HOOK_NAMES",
    "KeySetFilter",
    "default_collectors",
]
