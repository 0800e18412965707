from __future__ import annotations

from pathlib import Path
from typing import Optional


class ConfigError(Exception):
    """Base class for startup failures that end the process."""


class ConfigPathError(ConfigError):
    """The current user's home directory could not be resolved."""


class ConfigAccessError(ConfigError):
    """The config file could not be read or opened for writing."""

    def __init__(self, path: Path, reason: str, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        super().__init__(f"{reason} {path}: {cause}" if cause else f"{reason} {path}")
