"""Object store statistics: loose counts, packs, info/ and alternates.

Every directory and file handle is opened in a ``with`` block so it is
released before the collector returns, including on the error paths.
"""

import logging
import os
import string
from pathlib import Path
from typing import List, Optional, Set

from .base import CollectionContext, Collector

logger = logging.getLogger(__name__)

NOT_IN_REPOSITORY = "not run from a git repository - no objects to show"
NO_ALTERNATES = "No alternates file found."


def _is_fanout_name(name: str) -> bool:
    return len(name) == 2 and all(c in string.hexdigits for c in name)


def _count_files(path: str) -> Optional[int]:
    try:
        with os.scandir(path) as entries:
            return sum(1 for entry in entries if entry.is_file(follow_symlinks=False))
    except OSError as e:
        logger.debug(f"Could not count files in {path}: {e}")
        return None


def loose_object_counts(object_dir: Path) -> str:
    """One ``<xx>: <count>`` line per two-hex-digit fan-out directory.

    Directories are listed in the order the filesystem returns them.
    """
    lines: List[str] = []
    try:
        with os.scandir(object_dir) as entries:
            for entry in entries:
                if not _is_fanout_name(entry.name) or not entry.is_dir():
                    continue
                count = _count_files(entry.path)
                if count is None:
                    lines.append(f"{entry.name}: could not open directory '{entry.path}'")
                else:
                    lines.append(f"{entry.name}: {count}")
    except OSError as e:
        logger.warning(f"Could not open object directory {object_dir}: {e}")
        return f"could not open object directory '{object_dir}'\n"
    return "".join(f"{line}\n" for line in lines)


def packed_object_listing(object_dir: Path) -> str:
    """Full path of every entry in ``objects/pack``."""
    pack_dir = object_dir / "pack"
    try:
        with os.scandir(pack_dir) as entries:
            return "".join(f"{entry.path}\n" for entry in entries)
    except OSError as e:
        logger.debug(f"Could not open {pack_dir}: {e}")
        return f"could not open directory '{pack_dir}'\n"


def _list_recursively(
    path: str, lines: List[str], depth: int, max_depth: int, visited: Set[str]
) -> None:
    visited.add(os.path.realpath(path))
    with os.scandir(path) as entries:
        for entry in entries:
            lines.append(entry.path)
            if not entry.is_dir():
                continue
            if depth >= max_depth:
                logger.debug(f"Not descending into {entry.path}: depth limit {max_depth}")
                continue
            if os.path.realpath(entry.path) in visited:
                logger.debug(f"Not descending into {entry.path}: already listed")
                continue
            try:
                _list_recursively(entry.path, lines, depth + 1, max_depth, visited)
            except OSError as e:
                logger.debug(f"Could not open {entry.path}: {e}")
                lines.append(f"could not open directory '{entry.path}'")


def info_directory_listing(object_dir: Path, max_depth: int = 32) -> str:
    """Depth-first listing of everything under ``objects/info``.

    A directory is entered at most once (by real path) and no deeper than
    ``max_depth`` levels below ``info``.
    """
    info_dir = object_dir / "info"
    lines: List[str] = []
    try:
        _list_recursively(str(info_dir), lines, 1, max_depth, set())
    except OSError as e:
        logger.debug(f"Could not open {info_dir}: {e}")
        return f"could not open directory '{info_dir}'\n"
    return "".join(f"{line}\n" for line in lines)


def _exists(path: bytes) -> bool:
    try:
        return os.access(path, os.F_OK)
    except ValueError:
        # embedded NUL
        return False


def alternates_summary(object_dir: Path) -> str:
    """Count the alternates that exist and the ones that do not.

    Relative entries are taken relative to the object directory. Entries are
    raw bytes, as git writes them, and are checked without decoding.
    """
    alternates_file = object_dir / "info" / "alternates"
    try:
        with open(alternates_file, "rb") as f:
            lines = f.read().splitlines()
    except FileNotFoundError:
        return NO_ALTERNATES + "\n"
    except OSError as e:
        logger.warning(f"Could not read {alternates_file}: {e}")
        return f"could not read '{alternates_file}': {e.strerror}\n"

    base = os.fsencode(object_dir)
    working = broken = 0
    for line in lines:
        if not line or line.startswith(b"#"):
            continue
        if _exists(os.path.join(base, line)):
            working += 1
        else:
            logger.debug(f"Broken alternate: {line!r}")
            broken += 1

    return f"{working + broken} alternates found ({working} working, {broken} broken)\n"


class ObjectStoreCollector(Collector):
    """Base for sections that need the repository's object directory."""

    def collect(self, context: CollectionContext) -> str:
        if context.repository is None:
            return NOT_IN_REPOSITORY + "\n"
        return self.collect_from(context.repository.object_dir, context)

    def collect_from(self, object_dir: Path, context: CollectionContext) -> str:
        raise NotImplementedError("Subclasses must implement this method")


class LooseObjectCollector(ObjectStoreCollector):
    title = "Loose Object Counts"

    def collect_from(self, object_dir: Path, context: CollectionContext) -> str:
        return loose_object_counts(object_dir)


class PackedObjectCollector(ObjectStoreCollector):
    title = "Packed Object Summary"

    def collect_from(self, object_dir: Path, context: CollectionContext) -> str:
        return packed_object_listing(object_dir)


class ObjectInfoCollector(ObjectStoreCollector):
    title = "Object Info Summary"

    def collect_from(self, object_dir: Path, context: CollectionContext) -> str:
        return info_directory_listing(object_dir, context.settings.max_info_depth)


class AlternatesCollector(ObjectStoreCollector):
    title = "Alternates"

    def collect_from(self, object_dir: Path, context: CollectionContext) -> str:
        return alternates_summary(object_dir)
