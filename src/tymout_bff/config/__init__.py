"""Configuration module for the Explore BFF."""

from tymout_bff.config.factory import create_aggregator, create_directory, create_from_config
from tymout_bff.config.loader import (
    CONFIG_PATH_ENV,
    get_default_config_path,
    load_config,
    resolve_config,
)
from tymout_bff.config.models import (
    BffConfig,
    EventDirectoryConfig,
    ExploreConfig,
    LoggingConfig,
    ServerConfig,
)

__all__ = [
    "BffConfig",
    "CONFIG_PATH_ENV",
    "EventDirectoryConfig",
    "ExploreConfig",
    "LoggingConfig",
    "ServerConfig",
    "create_aggregator",
    "create_directory",
    "create_from_config",
    "get_default_config_path",
    "load_config",
    "resolve_config",
]
