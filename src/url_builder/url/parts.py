"""Part factories for ``new`` and ``UrlBuilder.clone``.

Each factory captures a value and returns a callable that applies the
matching configuration operation when the builder is constructed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from url_builder.query.modes import QueryMode
    from url_builder.url.builder import UrlBuilder, UrlPart


def scheme(value: str) -> UrlPart:
    def apply(builder: UrlBuilder) -> None:
        builder.set_scheme(value)

    return apply


def host(value: str) -> UrlPart:
    """Set the host; a full URL also contributes scheme, port and path."""

    def apply(builder: UrlBuilder) -> None:
        builder.set_host(value)

    return apply


def user(value: str) -> UrlPart:
    def apply(builder: UrlBuilder) -> None:
        builder.set_user(value)

    return apply


def password(value: str) -> UrlPart:
    def apply(builder: UrlBuilder) -> None:
        builder.set_password(value)

    return apply


def credentials(user_value: str, password_value: str) -> UrlPart:
    """Set user and password together; ignored unless both are non-empty."""

    def apply(builder: UrlBuilder) -> None:
        builder.set_credentials(user_value, password_value)

    return apply


def path(segment: str) -> UrlPart:
    def apply(builder: UrlBuilder) -> None:
        builder.add_path(segment)

    return apply


def id_segment(value: object) -> UrlPart:
    """Set the trailing id segment, rendered verbatim after the path."""

    def apply(builder: UrlBuilder) -> None:
        builder.set_id(value)

    return apply


def port(value: int) -> UrlPart:
    def apply(builder: UrlBuilder) -> None:
        builder.set_port(value)

    return apply


def mode(value: QueryMode) -> UrlPart:
    def apply(builder: UrlBuilder) -> None:
        builder.set_mode(value)

    return apply


def query(name: str, value: object) -> UrlPart:
    def apply(builder: UrlBuilder) -> None:
        builder.add_query(name, value)

    return apply


def fragment(value: str) -> UrlPart:
    def apply(builder: UrlBuilder) -> None:
        builder.set_fragment(value)

    return apply


def end_with_slash(enabled: bool) -> UrlPart:  # noqa: FBT001
    def apply(builder: UrlBuilder) -> None:
        builder.set_end_path_with_slash(enabled)

    return apply
