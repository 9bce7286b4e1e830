"""Render errors."""

from __future__ import annotations


class DuplicateQueryNameError(ValueError):
    """Raised when a query name repeats while duplicates are forbidden."""

    def __init__(self, name: str) -> None:
        super().__init__(f"duplicate query name found: {name!r}")
        self.name = name
