"""
Server configuration

Defaults for the local listener live here. Only the ``--port`` command-line
flag overrides them; there are no environment variables or config files.

The listener always binds to the loopback interface so the bundled UI is not
exposed beyond the local machine.
"""

from dataclasses import dataclass
from typing import Optional


DEFAULT_HOST = "localhost"
DEFAULT_PORT = 4173
# uvicorn's own logger; individual requests are not logged
LOG_LEVEL = "warning"
ACCESS_LOG = False


class ServerError(Exception):
    """Fatal startup or serving failure. Terminates the process."""


class BindError(ServerError):
    """The listener address is malformed or cannot be bound."""


@dataclass(frozen=True)
class Address:
    host: str
    port: int

    @classmethod
    def parse(cls, value: str) -> "Address":
        host, sep, port_text = value.rpartition(":")
        if not sep or not host:
            raise BindError(f"invalid address {value!r}: expected host:port")
        if host.startswith("[") and host.endswith("]"):
            host = host[1:-1]
        if not port_text.isdigit():
            raise BindError(f"invalid port {port_text!r} in address {value!r}")
        port = int(port_text)
        if not 1 <= port <= 65535:
            raise BindError(f"port {port} out of range (1-65535)")
        return cls(host=host, port=port)

    @property
    def is_ipv6(self) -> bool:
        return ":" in self.host

    @property
    def url(self) -> str:
        host = f"[{self.host}]" if self.is_ipv6 else self.host
        return f"http://{host}:{self.port}"

    def __str__(self) -> str:
        host = f"[{self.host}]" if self.is_ipv6 else self.host
        return f"{host}:{self.port}"


@dataclass
class ServerSettings:
    host: str
    port: int
    log_level: str
    access_log: bool

    @property
    def address(self) -> str:
        return str(Address(self.host, self.port))


def load_settings(port: Optional[int] = None, host: Optional[str] = None) -> ServerSettings:
    return ServerSettings(
        host=DEFAULT_HOST if host is None else host,
        port=DEFAULT_PORT if port is None else port,
        log_level=LOG_LEVEL,
        access_log=ACCESS_LOG,
    )
