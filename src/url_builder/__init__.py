"""Composable URL and query-string construction."""

from url_builder.errors import DuplicateQueryNameError
from url_builder.query import QueryMode, QueryPair, QueryPart, QueryStringBuilder, new_query_string, nv
from url_builder.url import (
    HostParts,
    UrlBuilder,
    UrlPart,
    clone,
    credentials,
    end_with_slash,
    fragment,
    host,
    id_segment,
    mode,
    new,
    new_url,
    new_url_with_id,
    new_url_with_path,
    parse_host,
    password,
    path,
    port,
    query,
    scheme,
    user,
)

__all__ = [
    "DuplicateQueryNameError",
    "HostParts",
    "QueryMode",
    "QueryPair",
    "QueryPart",
    "QueryStringBuilder",
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
    "new_query_string",
    "new_url",
    "new_url_with_id",
    "new_url_with_path",
    "nv",
    "parse_host",
    "password",
    "path",
    "port",
    "query",
    "scheme",
    "user",
]
