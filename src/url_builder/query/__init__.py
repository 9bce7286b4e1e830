from url_builder.query.encoding import QueryPair, encode_value, render_pairs, resolve_pairs, stringify
from url_builder.query.modes import QueryMode
from url_builder.query.query_string import QueryPart, QueryStringBuilder, new_query_string, nv

__all__ = [
    "QueryMode",
    "QueryPair",
    "QueryPart",
    "QueryStringBuilder",
    "encode_value",
    "new_query_string",
    "nv",
    "render_pairs",
    "resolve_pairs",
    "stringify",
]
