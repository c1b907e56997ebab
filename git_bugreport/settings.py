"""Runtime settings for git-bugreport.

The command line has a single option, so everything else that can be tuned
is read from ``GIT_BUGREPORT_*`` environment variables.
"""

import os
from typing import Dict, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from git_bugreport.utils.errors import SettingsError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# Field name -> environment variable
ENV_VARS: Dict[str, str] = {
    "git_executable": "GIT_BUGREPORT_GIT",
    "log_level": "GIT_BUGREPORT_LOG_LEVEL",
    "helper_timeout": "GIT_BUGREPORT_HELPER_TIMEOUT",
    "max_info_depth": "GIT_BUGREPORT_MAX_INFO_DEPTH",
    "launch_editor": "GIT_BUGREPORT_EDIT",
}


class BugreportSettings(BaseModel):
    """Settings for one git-bugreport run."""

    git_executable: str = Field("git", description="git binary to invoke")
    log_level: str = Field("WARNING", description="Python log level")
    helper_timeout: Optional[float] = Field(
        None, gt=0, description="Seconds to wait for git-remote-https (None waits forever)"
    )
    max_info_depth: int = Field(
        32, ge=1, description="Deepest level the objects/info walk descends to"
    )
    launch_editor: bool = Field(True, description="Open the report in an editor")

    @field_validator("git_executable")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(LOG_LEVELS)}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "BugreportSettings":
        """Build settings from environment variables.

        Raises:
            SettingsError: If a variable holds an invalid value
        """
        if environ is None:
            environ = os.environ

        values = {
            name: environ[var]
            for name, var in ENV_VARS.items()
            if environ.get(var, "") != ""
        }
        try:
            return cls(**values)
        except ValidationError as e:
            first = e.errors()[0]
            name = str(first["loc"][0]) if first["loc"] else None
            var = ENV_VARS.get(name, name)
            raise SettingsError(f"invalid {var}: {first['msg']}", field=name) from e
