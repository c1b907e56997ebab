"""Configuration keys that may appear in a bug report.

Keys are spelled the way ``git config --list`` prints them: section and
variable name lowercased. Nothing here may hold credentials, tokens, URLs
with embedded passwords, or personal data.
"""

from typing import Iterable, Set

CONFIG_SAFELIST = (
    "core.autocrlf",
    "core.bare",
    "core.bigfilethreshold",
    "core.checkstat",
    "core.compression",
    "core.eol",
    "core.filemode",
    "core.fscache",
    "core.fsmonitor",
    "core.fsyncmethod",
    "core.ignorecase",
    "core.logallrefupdates",
    "core.loosecompression",
    "core.multipackindex",
    "core.packedgitlimit",
    "core.packedgitwindowsize",
    "core.precomposeunicode",
    "core.preloadindex",
    "core.protecthfs",
    "core.protectntfs",
    "core.repositoryformatversion",
    "core.safecrlf",
    "core.sharedrepository",
    "core.sparsecheckout",
    "core.sparsecheckoutcone",
    "core.splitindex",
    "core.symlinks",
    "core.trustctime",
    "core.untrackedcache",
    "core.whitespace",
    "extensions.objectformat",
    "extensions.partialclone",
    "extensions.worktreeconfig",
    "feature.experimental",
    "feature.manyfiles",
    "fetch.fsckobjects",
    "fetch.negotiationalgorithm",
    "fetch.parallel",
    "fetch.prune",
    "fetch.writecommitgraph",
    "gc.auto",
    "gc.autodetach",
    "gc.autopacklimit",
    "gc.cruftpacks",
    "gc.writecommitgraph",
    "index.skiphash",
    "index.threads",
    "index.version",
    "init.defaultbranch",
    "merge.conflictstyle",
    "merge.renames",
    "pack.threads",
    "pack.usesparse",
    "pack.writebitmaphashcache",
    "protocol.version",
    "pull.ff",
    "pull.rebase",
    "push.default",
    "rebase.autosquash",
    "rebase.autostash",
    "rebase.backend",
    "receive.fsckobjects",
    "repack.usedeltabaseoffset",
    "rerere.enabled",
    "sendemail.smtpencryption",
    "sendemail.smtpserverport",
    "status.showuntrackedfiles",
    "submodule.recurse",
    "transfer.fsckobjects",
    "uploadpack.allowfilter",
)


class KeySetFilter:
    """Exact, case-sensitive membership test over a set of config keys.

    Use as a context manager to have the set emptied on exit:

        with KeySetFilter.from_keys(CONFIG_SAFELIST) as safelist:
            kept = [e for e in entries if e.key in safelist]
    """

    def __init__(self, capacity_hint: int = 0):
        """Initialize an empty filter.

        Args:
            capacity_hint: Expected number of keys. A Python set grows on
                its own, so this is only recorded.
        """
        self.capacity_hint = capacity_hint
        self._keys: Set[str] = set()

    @classmethod
    def from_keys(cls, keys: Iterable[str]) -> "KeySetFilter":
        keys = tuple(keys)
        key_filter = cls(capacity_hint=len(keys))
        for key in keys:
            key_filter.insert(key)
        return key_filter

    def insert(self, key: str) -> bool:
        """Add ``key``; return True if it was already present."""
        if key in self._keys:
            return True
        self._keys.add(key)
        return False

    def contains(self, key: str) -> bool:
        return key in self._keys

    def clear(self) -> None:
        self._keys.clear()

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.contains(key)

    def __len__(self) -> int:
        return len(self._keys)

    def __enter__(self) -> "KeySetFilter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.clear()
