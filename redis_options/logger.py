from __future__ import annotations

import logging
import sys
from functools import lru_cache
from typing import TYPE_CHECKING, Literal, Protocol, cast

import structlog
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from structlog.processors import CallsiteParameter

if TYPE_CHECKING:
    from structlog.types import Processor

type BoundLogger = structlog.stdlib.BoundLogger
type LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"]


class LoggingConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="LOG_",
        extra="ignore",
        frozen=True,
    )

    level: LogLevel = Field(default="INFO")
    json_output: bool = Field(default=False)
    service_name: str = Field(default="redis-options")
    library_log_levels: dict[str, LogLevel] = Field(default_factory=dict)


class RendererStrategy(Protocol):
    def build_processors(self) -> list[Processor]: ...


def _shared_processors(timestamp_fmt: str, utc: bool) -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                CallsiteParameter.MODULE,
                CallsiteParameter.LINENO,
            ]
        ),
        structlog.processors.TimeStamper(fmt=timestamp_fmt, utc=utc),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]


class JsonRendererStrategy:
    def build_processors(self) -> list[Processor]:
        return [
            *_shared_processors("iso", utc=True),
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]


class ConsoleRendererStrategy:
    def build_processors(self) -> list[Processor]:
        return [
            *_shared_processors("%Y-%m-%d %H:%M:%S", utc=False),
            structlog.dev.ConsoleRenderer(colors=False),
        ]


def _stdout_handler(level: LogLevel) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    return handler


@lru_cache(maxsize=1)
def _get_default_config() -> LoggingConfig:
    return LoggingConfig()


def configure_logging(config: LoggingConfig | None = None) -> BoundLogger:
    """Install structlog processors and a stdout handler on the root logger.

    Parameters
    ----------
    config : LoggingConfig | None
        Logging settings. Read from ``LOG_*`` environment variables when omitted.

    Returns
    -------
    BoundLogger
        A logger bound to the configured service name.
    """
    actual = config if config is not None else _get_default_config()
    renderer: RendererStrategy = JsonRendererStrategy() if actual.json_output else ConsoleRendererStrategy()

    structlog.configure(
        processors=renderer.build_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.handlers = [_stdout_handler(actual.level)]
    root.setLevel(actual.level)

    for lib_name, lib_level in actual.library_log_levels.items():
        logging.getLogger(lib_name).setLevel(lib_level)

    structlog.contextvars.bind_contextvars(service=actual.service_name)

    return cast(BoundLogger, structlog.get_logger())


def get_logger(name: str | None = None) -> BoundLogger:
    return cast(BoundLogger, structlog.get_logger(name))
