"""Host-string decomposition.

A host may be given bare (``api.example.com``), with a port
(``localhost:8080``) or as a full URL (``https://example.com:1500/api``).
Only scheme, host, port and path are recognized; query and fragment of a
full URL are ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlsplit

from url_builder.url.schemes import is_default_port

_SUPPORTED_SCHEMES = frozenset({"http", "https"})


@dataclass(frozen=True, slots=True)
class HostParts:
    host: str
    scheme: str = ""
    port: int = 0
    path: str = ""


def _parse_port(value: str) -> int:
    return int(value) if value.isascii() and value.isdigit() else 0


def parse_host(value: str) -> HostParts:
    host = value.replace('"', "/")
    scheme = ""
    port = 0
    path = ""

    try:
        parsed = urlsplit(host)
    except ValueError:
        parsed = None

    if parsed is not None and parsed.netloc:
        authority = parsed.netloc.rpartition("@")[2]
        host, _, raw_port = authority.partition(":")
        if parsed.scheme in _SUPPORTED_SCHEMES:
            scheme = parsed.scheme
        port = _parse_port(raw_port)
        if port and is_default_port(scheme, port):
            port = 0
        if parsed.path != "/":
            path = parsed.path

    # host:port shapes that do not parse as an absolute URL
    if ":" in host:
        host, _, raw_port = host.partition(":")
        port = _parse_port(raw_port)

    host = host.removesuffix("/")
    return HostParts(host=host, scheme=scheme, port=port, path=path)
