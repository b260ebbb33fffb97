"""
Reachability probes for servicewait.

Each probe performs exactly one attempt against a descriptor and reports the
outcome as a ProbeResult. Network, resolution, TLS and timeout errors never
escape a probe; they are classified into a FailureKind for diagnostics and
reported as unreachable.
"""

import socket
import ssl
import logging
from contextlib import closing
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, Optional

import requests

from servicewait.descriptor import ServiceDescriptor, ServiceProtocol

logger = logging.getLogger(__name__)

PROBE_ERRORS = (OSError, ValueError, requests.exceptions.RequestException)


class FailureKind(str, Enum):
    TIMEOUT = "timeout"
    REFUSED = "refused"
    DNS = "dns"
    TLS = "tls"
    HTTP_STATUS = "http_status"
    NOT_FOUND = "not_found"
    INVALID = "invalid"
    OTHER = "other"


@dataclass(frozen=True)
class ProbeResult:
    reachable: bool
    failure: Optional[FailureKind] = None
    detail: str = ""

    def __bool__(self):
        return self.reachable

    @classmethod
    def ok(cls) -> "ProbeResult":
        return cls(reachable=True)

    @classmethod
    def failed(cls, failure: FailureKind, detail: str = "") -> "ProbeResult":
        return cls(reachable=False, failure=failure, detail=detail)


def _exception_chain(exc: BaseException) -> Iterator[BaseException]:
    seen = set()
    while exc is not None and id(exc) not in seen:
        seen.add(id(exc))
        yield exc
        exc = exc.__cause__ or exc.__context__


# Checked in order against every exception in the cause/context chain
_CLASSIFICATION = (
    (FailureKind.DNS, (socket.gaierror,)),
    (FailureKind.TLS, (ssl.SSLError, requests.exceptions.SSLError)),
    (FailureKind.TIMEOUT, (TimeoutError, requests.exceptions.Timeout)),
    (FailureKind.REFUSED, (ConnectionRefusedError,)),
    (FailureKind.NOT_FOUND, (FileNotFoundError,)),
    (FailureKind.INVALID, (ValueError,)),
)


def classify_error(exc: BaseException) -> FailureKind:
    """Map a probe error to the most specific FailureKind found in its chain."""
    chain = list(_exception_chain(exc))
    for kind, types in _CLASSIFICATION:
        if any(isinstance(e, types) for e in chain):
            return kind
    return FailureKind.OTHER


class Probe:
    """One reachability attempt for a descriptor."""

    def probe(self, service: ServiceDescriptor) -> ProbeResult:
        try:
            return self._attempt(service)
        except PROBE_ERRORS as e:
            kind = classify_error(e)
            logger.debug(f"{type(self).__name__} for {service.name} ({service.address}) failed: {kind.value}: {e}")
            return ProbeResult.failed(kind, str(e))

    def _attempt(self, service: ServiceDescriptor) -> ProbeResult:
        raise NotImplementedError


class TcpProbe(Probe):
    def _attempt(self, service):
        if not service.port:
            return ProbeResult.failed(FailureKind.INVALID, f"missing port in address {service.address}")
        with closing(socket.create_connection((service.host, service.port), timeout=service.timeout)):
            return ProbeResult.ok()


class HttpProbe(Probe):
    @staticmethod
    def scheme_for(host: str) -> str:
        # Derived from the host text, not the protocol field
        return "https" if "https" in host else "http"

    @classmethod
    def url_for(cls, service: ServiceDescriptor) -> str:
        endpoint = service.endpoint or "/"
        return f"{cls.scheme_for(service.host)}://{service.host}:{service.port}{endpoint}"

    def _attempt(self, service):
        url = self.url_for(service)
        with requests.get(url, timeout=service.timeout) as response:
            if 200 <= response.status_code < 300:
                return ProbeResult.ok()
            return ProbeResult.failed(FailureKind.HTTP_STATUS, f"GET {url} returned {response.status_code}")


class UnixProbe(Probe):
    @staticmethod
    def path_for(service: ServiceDescriptor) -> str:
        return f"{service.host}/{service.port}"

    def _attempt(self, service):
        if not hasattr(socket, "AF_UNIX"):
            return ProbeResult.failed(FailureKind.INVALID, "unix sockets are not supported on this platform")
        with closing(socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)) as sock:
            sock.settimeout(service.timeout)
            sock.connect(self.path_for(service))
            return ProbeResult.ok()


PROBES: Dict[ServiceProtocol, Probe] = {
    ServiceProtocol.TCP: TcpProbe(),
    ServiceProtocol.HTTP: HttpProbe(),
    ServiceProtocol.HTTPS: HttpProbe(),
    ServiceProtocol.UNIX: UnixProbe(),
}


def probe_for(service: ServiceDescriptor) -> Probe:
    return PROBES[service.kind]


def run_probe(service: ServiceDescriptor) -> ProbeResult:
    return probe_for(service).probe(service)


def check_service(service: ServiceDescriptor) -> bool:
    """Single reachability attempt, reduced to a boolean."""
    return run_probe(service).reachable
