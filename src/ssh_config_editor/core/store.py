from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, List

from .errors import ConfigAccessError, ConfigPathError
from .model import HostConfig
from .parser import parse_ssh_config

logger = logging.getLogger(__name__)

SSH_DIR_NAME = ".ssh"
CONFIG_NAME = "config"


def default_config_path() -> Path:
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as exc:
        raise ConfigPathError(f"Error getting current user: {exc}") from exc
    return home / SSH_DIR_NAME / CONFIG_NAME


def ensure_writable(path: Path) -> None:
    """Open path for appending, creating it (0600) when missing."""
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_APPEND, 0o600)
    except OSError as exc:
        raise ConfigAccessError(path, "Cannot write to", exc) from exc
    os.close(fd)


def load_hosts(path: Path) -> List[HostConfig]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigAccessError(path, "Could not open SSH config file at", exc) from exc
    hosts = parse_ssh_config(text)
    logger.debug("Loaded %d hosts from %s", len(hosts), path)
    return hosts


def render_config(hosts: Iterable[HostConfig]) -> str:
    return "".join(h.serialize() + "\n" for h in hosts)


def save_hosts(path: Path, hosts: Iterable[HostConfig]) -> None:
    """Replace the whole file with the rendered hosts.

    Comments and directives the parser does not keep are not written back.
    OSError propagates to the caller.
    """
    text = render_config(hosts)
    path.write_text(text, encoding="utf-8")
    logger.info("Wrote %d bytes to %s", len(text), path)
