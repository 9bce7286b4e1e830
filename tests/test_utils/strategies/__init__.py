from tests.test_utils.strategies.url import (
    hostname_strategy,
    query_names,
    query_pairs_strategy,
    query_values,
    segment_text,
)

__all__ = [
    "hostname_strategy",
    "query_names",
    "query_pairs_strategy",
    "query_values",
    "segment_text",
]
