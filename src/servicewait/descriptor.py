"""
Service descriptors and the command-line descriptor parser.

A descriptor string has the positional form::

    name:host[:port[:protocol[:endpoint]]]
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List

from servicewait.config import Config

logger = logging.getLogger(__name__)


class ServiceProtocol(str, Enum):
    """Closed set of probe variants."""

    TCP = "tcp"
    HTTP = "http"
    HTTPS = "https"
    UNIX = "unix"

    @classmethod
    def resolve(cls, text: str) -> "ServiceProtocol":
        """Case-insensitive lookup; empty or unknown text falls back to TCP."""
        try:
            return cls(text.lower())
        except ValueError:
            return cls.TCP


@dataclass(frozen=True)
class ServiceDescriptor:
    name: str = ""
    host: str = ""
    port: str = ""
    protocol: str = ""
    endpoint: str = ""
    timeout: float = Config.PROBE_TIMEOUT
    max_retries: int = Config.MAX_RETRIES
    retry_delay: float = Config.RETRY_DELAY

    @property
    def kind(self) -> ServiceProtocol:
        return ServiceProtocol.resolve(self.protocol)

    @property
    def address(self) -> str:
        return f"{self.host}:{self.port}"


def parse_service_config(text: str) -> ServiceDescriptor:
    """
    Parse one descriptor string.

    Never raises. Input with fewer than two fields yields a descriptor with
    an empty name and host, which will simply never become available.
    """
    parts = text.split(":")
    if len(parts) < 2:
        logger.warning(f"Malformed service descriptor {text!r}: expected name:host[:port[:protocol[:endpoint]]]")
        return ServiceDescriptor()

    name, host, port, protocol, endpoint = (parts + [""] * 3)[:5]
    return ServiceDescriptor(
        name=name,
        host=host,
        port=port,
        protocol=protocol,
        endpoint=endpoint,
    )


def parse_services(args: Iterable[str]) -> List[ServiceDescriptor]:
    return [parse_service_config(arg) for arg in args]
