from __future__ import annotations

import json
import logging
import os
import re
import sys
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, cast

import structlog

if TYPE_CHECKING:
    from collections.abc import MutableMapping

_SECRET_KEY_PATTERN = re.compile(r"(token|api_key|apikey|authorization|cookie|secret|password)", re.IGNORECASE)
_URL_CREDENTIALS_PATTERN = re.compile(r"(://[^:/@\s]+):[^@/\s]+@")
_QUERY_SECRET_PATTERN = re.compile(r"(token|api_key|apikey|access_token|password)=([^&#\s]+)")
_CONTROL_CHARS_PATTERN = re.compile(r"[\x00-\x1f\x7f]")
_MAX_VALUE_LENGTH = 4000

PACKAGE_LOGGER = "url_builder"
_STREAM_HANDLER_NAME = "url_builder.stdout"

# silent until the application configures logging
logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def _escape_control_char(match: re.Match[str]) -> str:
    char = match.group(0)
    if char == "\n":
        return "\\n"
    if char == "\r":
        return "\\r"
    if char == "\t":
        return "\\t"
    return f"\\x{ord(char):02x}"


def sanitize_value(value: object) -> object:
    if isinstance(value, str):
        sanitized = _CONTROL_CHARS_PATTERN.sub(_escape_control_char, value)
        sanitized = _URL_CREDENTIALS_PATTERN.sub(r"\1:***@", sanitized)
        sanitized = _QUERY_SECRET_PATTERN.sub(r"\1=***", sanitized)
        if len(sanitized) > _MAX_VALUE_LENGTH:
            return sanitized[:_MAX_VALUE_LENGTH] + "..."
        return sanitized
    if isinstance(value, (int, float, bool)) or value is None:
        return value
    if isinstance(value, dict):
        return {key: sanitize_value(val) for key, val in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [sanitize_value(val) for val in value]
    return str(value)


def sanitize_event(_: object, __: object, event_dict: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    sanitized: dict[str, Any] = {}
    for key, value in event_dict.items():
        if _SECRET_KEY_PATTERN.search(key):
            sanitized[key] = "***"
        else:
            sanitized[key] = sanitize_value(value)
    return sanitized


def _add_timestamp(_: object, __: object, event_dict: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    event_dict["timestamp"] = datetime.now(UTC).isoformat()
    return event_dict


def _render_json(_: object, __: object, event_dict: MutableMapping[str, Any]) -> str:
    return json.dumps(event_dict, ensure_ascii=False)


def parse_level() -> str:
    level = os.environ.get("LOG_LEVEL", "INFO").upper()
    if level not in {"DEBUG", "INFO", "WARNING", "ERROR"}:
        return "INFO"
    return level


def configure_logging() -> structlog.BoundLogger:
    format_hint = os.environ.get("LOG_FORMAT", "json").lower()
    level = parse_level()

    processors: list[structlog.types.Processor] = [
        sanitize_event,
        _add_timestamp,
        structlog.processors.add_log_level,
    ]
    if format_hint == "console":
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors.append(_render_json)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )
    _install_stream_handler(level)

    return get_logger(PACKAGE_LOGGER)


def _install_stream_handler(level: str) -> None:
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        if handler.get_name() == _STREAM_HANDLER_NAME:
            package_logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_STREAM_HANDLER_NAME)
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False


def get_logger(name: str) -> structlog.BoundLogger:
    """Return a logger backed by the stdlib logger ``name``.

    Events pass through the active structlog processors and end in the
    ``logging`` hierarchy, so nothing is written unless a handler is set up,
    by ``configure_logging`` or by the application.
    """
    stdlib_logger = structlog.stdlib.LoggerFactory()(name)
    return cast("structlog.BoundLogger", structlog.wrap_logger(stdlib_logger, cache_logger_on_first_use=False))
