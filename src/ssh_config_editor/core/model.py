from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List

DEFAULT_PORT = "22"

# Fields the editor cycles through, in cursor order.
EDITABLE_FIELDS = ("host", "hostname", "user", "port")
FIELD_LABELS = ("Host", "HostName", "User", "Port")


@dataclass
class HostConfig:
    host: str
    hostname: str = ""
    user: str = ""
    port: str = ""
    identity_file: str = ""

    def serialize(self) -> str:
        lines = [f"Host {self.host}"]
        if self.hostname:
            lines.append(f"  HostName {self.hostname}")
        if self.user:
            lines.append(f"  User {self.user}")
        if self.port:
            lines.append(f"  Port {self.port}")
        if self.identity_file:
            lines.append(f"  IdentityFile {self.identity_file}")
        return "\n".join(lines) + "\n"

    def matches(self, term: str) -> bool:
        """Case-sensitive substring match against alias or hostname; empty term matches all."""
        return not term or term in self.host or term in self.hostname

    def copy(self) -> HostConfig:
        return replace(self)

    def get_field(self, index: int) -> str:
        return getattr(self, EDITABLE_FIELDS[index])

    def set_field(self, index: int, value: str) -> None:
        setattr(self, EDITABLE_FIELDS[index], value)

    def normalize(self) -> None:
        """Trim edited values and fill the port the way the parser would on reload."""
        for i in range(len(EDITABLE_FIELDS)):
            self.set_field(i, self.get_field(i).strip())
        if not self.port:
            self.port = DEFAULT_PORT

    def summary_lines(self) -> List[str]:
        return [f"{label}: {self.get_field(i)}" for i, label in enumerate(FIELD_LABELS)]
