from __future__ import annotations

from enum import Enum


class QueryMode(Enum):
    """How repeated query names are resolved at render time."""

    KEEP_LAST = "keep_last"
    KEEP_ALL = "keep_all"
    DUPLICATES_ERROR = "duplicates_error"
