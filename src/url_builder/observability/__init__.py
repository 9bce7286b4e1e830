from url_builder.observability.logging import (
    PACKAGE_LOGGER,
    configure_logging,
    get_logger,
    parse_level,
    sanitize_event,
    sanitize_value,
)

__all__ = ["PACKAGE_LOGGER", "configure_logging", "get_logger", "parse_level", "sanitize_event", "sanitize_value"]
