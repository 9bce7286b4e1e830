from __future__ import annotations

DEFAULT_SCHEME = "https"
DEFAULT_HOST = "localhost"
DEFAULT_PORTS = {"http": 80, "https": 443}


def default_port(scheme: str) -> int:
    return DEFAULT_PORTS.get(scheme, 0)


def is_default_port(scheme: str, port: int) -> bool:
    return DEFAULT_PORTS.get(scheme) == port
