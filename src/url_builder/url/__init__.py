from url_builder.url.builder import UrlBuilder, UrlPart, clone, new, new_url, new_url_with_id, new_url_with_path
from url_builder.url.host import HostParts, parse_host
from url_builder.url.parts import (
    credentials,
    end_with_slash,
    fragment,
    host,
    id_segment,
    mode,
    password,
    path,
    port,
    query,
    scheme,
    user,
)

__all__ = [
    "HostParts",
    "UrlBuilder",
    "UrlPart",
    "clone",
    "credentials",
    "end_with_slash",
    "fragment",
    "host",
    "id_segment",
    "mode",
    "new",
    "new_url",
    "new_url_with_id",
    "new_url_with_path",
    "parse_host",
    "password",
    "path",
    "port",
    "query",
    "scheme",
    "user",
]
