"""Standalone query-string builder.

Produces a bare ``name=value&...`` string without the leading ``?``. Useful
when a query string must travel as an opaque value, for example encrypted
and embedded as a single parameter of another URL.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

from url_builder.errors import DuplicateQueryNameError
from url_builder.observability import get_logger
from url_builder.query.encoding import QueryPair, render_pairs, stringify
from url_builder.query.modes import QueryMode

logger = get_logger(__name__)

QueryPart: TypeAlias = Callable[["QueryStringBuilder"], object]


class QueryStringBuilder:
    __slots__ = ("_pairs", "err", "mode")

    def __init__(self, *parts: QueryPart, mode: QueryMode = QueryMode.KEEP_LAST) -> None:
        self.mode = mode
        self._pairs: list[QueryPair] = []
        self.err: DuplicateQueryNameError | None = None
        for part in parts:
            part(self)

    @property
    def pairs(self) -> tuple[QueryPair, ...]:
        return tuple(self._pairs)

    def add(self, name: str, value: object) -> QueryStringBuilder:
        if name:
            self._pairs.append(QueryPair(name, stringify(value)))
        return self

    def clone(self, *parts: QueryPart) -> QueryStringBuilder:
        copied = QueryStringBuilder(mode=self.mode)
        copied._pairs = list(self._pairs)
        for part in parts:
            part(copied)
        return copied

    def build(self) -> str:
        """Render the query string, or ``""`` if a duplicate name is forbidden."""
        self.err = None
        if not self._pairs:
            return ""
        try:
            return render_pairs(self._pairs, self.mode)
        except DuplicateQueryNameError as exc:
            logger.warning("duplicate_query_name", name=exc.name)
            self.err = exc
            return ""

    def build_safe(self) -> str:
        result = self.build()
        if self.err is not None:
            raise self.err
        return result

    def __str__(self) -> str:
        return self.build()

    def __repr__(self) -> str:
        return f"QueryStringBuilder(mode={self.mode!r}, pairs={self._pairs!r})"


def nv(name: str, value: object) -> QueryPart:
    """Append a name/value pair."""

    def apply(builder: QueryStringBuilder) -> None:
        builder.add(name, value)

    return apply


def new_query_string(*parts: QueryPart, mode: QueryMode = QueryMode.KEEP_LAST) -> QueryStringBuilder:
    return QueryStringBuilder(*parts, mode=mode)
