from __future__ import annotations

import logging
import re
from typing import List

from .model import DEFAULT_PORT, HostConfig

logger = logging.getLogger(__name__)

HOST_RE = re.compile(r"^Host\s+(?P<host>.+)$")
FIELD_RE = re.compile(r"^(?P<key>HostName|User|Port|IdentityFile)\s+(?P<value>.+)$")

_KEY_TO_ATTR = {
    "HostName": "hostname",
    "User": "user",
    "Port": "port",
    "IdentityFile": "identity_file",
}


def _close(host: HostConfig) -> HostConfig:
    if not host.port:
        host.port = DEFAULT_PORT
    return host


def parse_ssh_config(text: str) -> List[HostConfig]:
    """Parse ssh_config text into host records, in file order.

    Only HostName, User, Port and IdentityFile are kept; other directives,
    comments and anything before the first Host line are dropped. A record
    without a Port gets the default when it is closed.
    """
    hosts: List[HostConfig] = []
    current: HostConfig | None = None
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith('#'):
            continue
        m = HOST_RE.match(line)
        if m:
            if current:
                hosts.append(_close(current))
            current = HostConfig(host=m.group('host').strip())
            continue
        m2 = FIELD_RE.match(line)
        if m2 and current:
            setattr(current, _KEY_TO_ATTR[m2.group('key')], m2.group('value').strip())
    if current:
        hosts.append(_close(current))
    logger.debug("Parsed %d host blocks", len(hosts))
    return hosts


def filter_indices(hosts: List[HostConfig], term: str) -> List[int]:
    return [i for i, h in enumerate(hosts) if h.matches(term)]


def filter_hosts(hosts: List[HostConfig], term: str) -> List[HostConfig]:
    return [hosts[i] for i in filter_indices(hosts, term)]
