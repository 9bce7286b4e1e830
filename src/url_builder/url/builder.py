"""Composable URL builder.

Components are accumulated through configuration operations applied in call
order and rendered on demand::

    >>> new_url("example.com", path("api"), id_segment(123), query("q", "go")).build()
    'https://example.com/api/123?q=go'

Configuration is not thread-safe. Rendering works on a private snapshot, so
repeated renders of an unchanged builder return the same string.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import TypeAlias

from url_builder.errors import DuplicateQueryNameError
from url_builder.observability import get_logger
from url_builder.query.encoding import QueryPair, render_pairs, stringify
from url_builder.query.modes import QueryMode
from url_builder.url.host import parse_host
from url_builder.url.schemes import DEFAULT_HOST, DEFAULT_SCHEME, default_port, is_default_port

logger = get_logger(__name__)

UrlPart: TypeAlias = Callable[["UrlBuilder"], object]


@dataclass(slots=True)
class _Snapshot:
    scheme: str
    host: str
    port: int
    user: str
    password: str
    path: tuple[str, ...]
    id: str
    query: tuple[QueryPair, ...]
    mode: QueryMode
    fragment: str
    end_path_with_slash: bool

    def with_defaults(self) -> _Snapshot:
        scheme = (self.scheme or DEFAULT_SCHEME).lower()
        return replace(
            self,
            scheme=scheme,
            host=self.host or DEFAULT_HOST,
            port=self.port or default_port(scheme),
        )


def _clean_segment(segment: str) -> str:
    segment = segment.replace('"', "/")
    return segment.removeprefix("/").removesuffix("/")


@dataclass(slots=True)
class UrlBuilder:
    scheme: str = ""
    host: str = ""
    port: int = 0
    user: str = ""
    password: str = field(default="", repr=False)
    path: list[str] = field(default_factory=list)
    id: str = ""
    query: list[QueryPair] = field(default_factory=list)
    mode: QueryMode = QueryMode.KEEP_LAST
    fragment: str = ""
    end_path_with_slash: bool = False
    err: DuplicateQueryNameError | None = field(default=None, compare=False)

    def apply(self, *parts: UrlPart) -> UrlBuilder:
        for part in parts:
            part(self)
        return self

    def set_scheme(self, value: str) -> UrlBuilder:
        if value:
            self.scheme = value
        return self

    def set_host(self, value: str) -> UrlBuilder:
        if not value:
            return self
        parts = parse_host(value)
        logger.debug("host_parsed", host=parts.host, scheme=parts.scheme, port=parts.port, path=parts.path)
        self.host = parts.host
        if parts.scheme:
            self.scheme = parts.scheme
        if parts.port:
            self.port = parts.port
        if parts.path:
            self.path.append(parts.path)
        return self

    def set_user(self, value: str) -> UrlBuilder:
        if value:
            self.user = value
        return self

    def set_password(self, value: str) -> UrlBuilder:
        if value:
            self.password = value
        return self

    def set_credentials(self, user: str, password: str) -> UrlBuilder:
        if user and password:
            self.user = user
            self.password = password
        return self

    def add_path(self, segment: str) -> UrlBuilder:
        if segment:
            self.path.append(segment)
        return self

    def set_id(self, value: object) -> UrlBuilder:
        if value is not None and value != "":
            self.id = stringify(value)
        return self

    def set_port(self, value: int) -> UrlBuilder:
        if value > 0:
            self.port = value
        return self

    def set_mode(self, value: QueryMode) -> UrlBuilder:
        self.mode = value
        return self

    def add_query(self, name: str, value: object) -> UrlBuilder:
        if name:
            self.query.append(QueryPair(name, stringify(value)))
        return self

    def set_fragment(self, value: str) -> UrlBuilder:
        if value:
            self.fragment = value
        return self

    def set_end_path_with_slash(self, enabled: bool) -> UrlBuilder:  # noqa: FBT001
        self.end_path_with_slash = enabled
        return self

    def clone(self, *parts: UrlPart) -> UrlBuilder:
        copied = replace(self, path=list(self.path), query=list(self.query), err=None)
        return copied.apply(*parts)

    def _snapshot(self) -> _Snapshot:
        return _Snapshot(
            scheme=self.scheme,
            host=self.host,
            port=self.port,
            user=self.user,
            password=self.password,
            path=tuple(self.path),
            id=self.id,
            query=tuple(self.query),
            mode=self.mode,
            fragment=self.fragment,
            end_path_with_slash=self.end_path_with_slash,
        )

    def build(self) -> str:
        """Render the URL, or ``""`` if a duplicate query name is forbidden.

        The failure is available through ``err`` until the next render.
        """
        self.err = None
        try:
            return _render(self._snapshot().with_defaults())
        except DuplicateQueryNameError as exc:
            logger.warning("duplicate_query_name", name=exc.name, mode=self.mode.value)
            self.err = exc
            return ""

    def build_safe(self) -> str:
        result = self.build()
        if self.err is not None:
            raise self.err
        return result

    def __str__(self) -> str:
        return self.build()


def _render(snap: _Snapshot) -> str:
    out = [snap.scheme, "://"]

    if snap.user:
        out.append(snap.user)
        if snap.password:
            out.append(f":{snap.password}")
        out.append("@")

    out.append(snap.host)
    if snap.port and not is_default_port(snap.scheme, snap.port):
        out.append(f":{snap.port}")

    for segment in snap.path:
        if not segment:
            continue
        out.append("/")
        out.append(_clean_segment(segment))

    terminated = "".join(out).endswith("/")

    if snap.id:
        if not terminated:
            out.append("/")
            terminated = True
        out.append(snap.id)

    if snap.query:
        if not terminated and snap.end_path_with_slash:
            out.append("/")
        out.append("?")
        out.append(render_pairs(snap.query, snap.mode))
        terminated = True

    if snap.fragment:
        if not terminated and snap.end_path_with_slash:
            out.append("/")
            terminated = True
        out.append(f"#{snap.fragment}")

    if not terminated and snap.end_path_with_slash:
        out.append("/")

    return "".join(out)


def clone(builder: UrlBuilder, *parts: UrlPart) -> UrlBuilder:
    return builder.clone(*parts)


def new(*parts: UrlPart) -> UrlBuilder:
    return UrlBuilder().apply(*parts)


def new_url(host_value: str, *parts: UrlPart) -> UrlBuilder:
    return UrlBuilder().set_host(host_value).apply(*parts)


def new_url_with_path(host_value: str, path_value: str, *parts: UrlPart) -> UrlBuilder:
    return UrlBuilder().set_host(host_value).add_path(path_value).apply(*parts)


def new_url_with_id(host_value: str, path_value: str, id_value: object, *parts: UrlPart) -> UrlBuilder:
    return UrlBuilder().set_host(host_value).add_path(path_value).set_id(id_value).apply(*parts)
