"""Value stringification and query rendering shared by both builders."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from urllib.parse import quote_plus

from url_builder.errors import DuplicateQueryNameError
from url_builder.query.modes import QueryMode

if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass(frozen=True, slots=True)
class QueryPair:
    name: str
    value: str


def stringify(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return repr(value)
    return str(value)


def encode_value(value: str) -> str:
    return quote_plus(value, safe="")


def resolve_pairs(pairs: Iterable[QueryPair], mode: QueryMode) -> list[QueryPair]:
    """Apply the duplicate policy of ``mode`` to ``pairs``.

    ``KEEP_LAST`` and ``DUPLICATES_ERROR`` keep each name at the position it
    was first seen. ``DUPLICATES_ERROR`` raises on the second occurrence.
    """
    if mode is QueryMode.KEEP_ALL:
        return list(pairs)

    folded: dict[str, str] = {}
    for pair in pairs:
        if pair.name in folded and mode is QueryMode.DUPLICATES_ERROR:
            raise DuplicateQueryNameError(pair.name)
        folded[pair.name] = pair.value
    return [QueryPair(name, value) for name, value in folded.items()]


def render_pairs(pairs: Iterable[QueryPair], mode: QueryMode) -> str:
    return "&".join(f"{pair.name}={encode_value(pair.value)}" for pair in resolve_pairs(pairs, mode))
