"""Redis client configuration options."""

from __future__ import annotations

from .core.enums import RedisClientType, RedisRole, RedisSlaves
from .exceptions import DecodeError, RedisOptionsError
from .logger import LoggingConfig, configure_logging, get_logger
from .net import NetClientOptions
from .options import DEFAULT_ENDPOINT, RedisOptions
from .settings import RedisSettings

__version__ = "0.1.0"

__all__ = [
    # Options
    "DEFAULT_ENDPOINT",
    "NetClientOptions",
    "RedisOptions",
    "RedisSettings",
    # Enums
    "RedisClientType",
    "RedisRole",
    "RedisSlaves",
    # Errors
    "DecodeError",
    "RedisOptionsError",
    # Logging
    "LoggingConfig",
    "configure_logging",
    "get_logger",
]
