"""Configuration enumeration through ``git config --list``.

Every entry from every source is returned, in the order git reads them, so a
key set in both global and local config appears twice.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class ConfigScope(str, Enum):
    """Where a configuration entry came from, as named by ``--show-scope``."""

    SYSTEM = "system"
    GLOBAL = "global"
    LOCAL = "local"
    WORKTREE = "worktree"
    COMMAND = "command"
    SUBMODULE = "submodule"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, text: str) -> "ConfigScope":
        try:
            return cls(text)
        except ValueError:
            return cls.UNKNOWN


class ConfigEntry(BaseModel):
    """One key/value pair from one configuration source."""

    key: str = Field(..., description="Canonical key, e.g. core.filemode")
    scope: ConfigScope = Field(..., description="Source of the entry")
    value: Optional[str] = Field(None, description="None for a bare boolean key")

    def render(self) -> str:
        return f"{self.key} ({self.scope.value}) : {self.value or ''}"


def parse_config_list(output: str) -> List[ConfigEntry]:
    """Parse ``git config --list --show-scope -z`` output.

    Each record is NUL-terminated: ``scope<TAB>key``, then ``<LF>value``
    unless the key was given without a value.
    """
    entries: List[ConfigEntry] = []
    for record in output.split("\0"):
        if not record:
            continue
        scope, _, rest = record.partition("\t")
        key, newline, value = rest.partition("\n")
        entries.append(
            ConfigEntry(
                key=key,
                scope=ConfigScope.parse(scope),
                value=value if newline else None,
            )
        )
    return entries


def list_config(runner) -> List[ConfigEntry]:
    """Return every configuration entry visible to this invocation.

    Raises:
        GitCommandError: If git cannot list its configuration
    """
    result = runner.run("config", "--list", "--show-scope", "-z")
    return parse_config_list(result.stdout)
