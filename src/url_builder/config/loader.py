from __future__ import annotations

import os
import tomllib
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from .errors import ConfigError
from .models import UrlConfig

if TYPE_CHECKING:
    from pathlib import Path

HOST_ENV_VAR = "URL_BUILDER_HOST"


def _parse_url_table(data: dict[str, Any]) -> dict[str, Any]:
    table = data.get("url")
    if table is None:
        msg = "url table is required"
        raise ConfigError(msg)
    if not isinstance(table, dict):
        msg = "url must be a table"
        raise ConfigError(msg)
    host_override = os.environ.get(HOST_ENV_VAR)
    if host_override:
        table = {**table, "host": host_override}
    return table


def load_config(path: Path) -> UrlConfig:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"failed to parse config: {exc}"
        raise ConfigError(msg) from exc

    table = _parse_url_table(data)
    try:
        return UrlConfig.from_raw(table)
    except ValidationError as exc:
        msg = f"invalid url config: {exc.error_count()} error(s)"
        raise ConfigError(msg) from exc
