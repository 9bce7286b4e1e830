from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, field_validator

from url_builder.query.modes import QueryMode
from url_builder.url import parts
from url_builder.url.builder import UrlBuilder, new

if TYPE_CHECKING:
    from collections.abc import Mapping

    from url_builder.url.builder import UrlPart


class QueryConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    value: str | int | float | bool = ""

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        if value == "":
            msg = "is required"
            raise ValueError(msg)
        return value


class UrlConfig(BaseModel):
    """Preset builder parts, applied in field order."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    scheme: str = ""
    host: str = ""
    port: int = Field(default=0, ge=0, le=65535)
    user: str = ""
    password: str = Field(default="", repr=False)
    paths: list[str] = Field(default_factory=list)
    id: str = ""
    mode: QueryMode = QueryMode.KEEP_LAST
    query: list[QueryConfig] = Field(default_factory=list)
    fragment: str = ""
    end_path_with_slash: bool = False

    @field_validator("scheme")
    @classmethod
    def _validate_scheme(cls, value: str) -> str:
        if value and not value.isascii():
            msg = "must be ASCII"
            raise ValueError(msg)
        return value

    def to_parts(self) -> list[UrlPart]:
        # host may carry its own scheme/port, so explicit fields come after it
        result: list[UrlPart] = [
            parts.host(self.host),
            parts.scheme(self.scheme),
            parts.port(self.port),
            parts.user(self.user),
            parts.password(self.password),
        ]
        result.extend(parts.path(segment) for segment in self.paths)
        result.append(parts.id_segment(self.id))
        result.append(parts.mode(self.mode))
        result.extend(parts.query(item.name, item.value) for item in self.query)
        result.append(parts.fragment(self.fragment))
        result.append(parts.end_with_slash(self.end_path_with_slash))
        return result

    def build_url(self, *extra: UrlPart) -> UrlBuilder:
        return new(*self.to_parts(), *extra)

    @classmethod
    def from_raw(cls, data: Mapping[str, object]) -> UrlConfig:
        return cls.model_validate(data)
