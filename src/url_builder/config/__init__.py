from .errors import ConfigError
from .loader import HOST_ENV_VAR, load_config
from .models import QueryConfig, UrlConfig

__all__ = [
    "HOST_ENV_VAR",
    "ConfigError",
    "QueryConfig",
    "UrlConfig",
    "load_config",
]
