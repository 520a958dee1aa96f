from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.enums import RedisClientType, RedisRole, RedisSlaves
from .logger import get_logger
from .options import (
    DEFAULT_MASTER_NAME,
    DEFAULT_MAX_NESTED_ARRAYS,
    DEFAULT_MAX_POOL_SIZE,
    DEFAULT_MAX_POOL_WAITING,
    DEFAULT_MAX_WAITING_HANDLERS,
    DEFAULT_POOL_CLEANER_INTERVAL,
    DEFAULT_POOL_RECYCLE_TIMEOUT,
    RedisOptions,
)

if TYPE_CHECKING:
    from structlog.stdlib import BoundLogger

logger: BoundLogger = get_logger(__name__)


class RedisSettings(BaseSettings):
    """Redis options read from ``REDIS_*`` environment variables.

    ``REDIS_ENDPOINTS`` is a JSON list, e.g. ``'["redis://a:7000", "redis://b:7000"]'``.
    Values are coerced from their string form, unlike `RedisOptions.from_json`.

    Examples
    --------
    >>> # REDIS_CLIENT_TYPE=CLUSTER REDIS_MAX_POOL_SIZE=6
    >>> options = RedisSettings().to_options()
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="REDIS_",
        extra="ignore",
        frozen=True,
    )

    client_type: RedisClientType = Field(default=RedisClientType.STANDALONE)
    endpoints: list[str] | None = Field(default=None)
    master_name: str = Field(default=DEFAULT_MASTER_NAME)
    role: RedisRole = Field(default=RedisRole.MASTER)
    slaves: RedisSlaves = Field(default=RedisSlaves.NEVER)
    max_waiting_handlers: int = Field(default=DEFAULT_MAX_WAITING_HANDLERS)
    max_nested_arrays: int = Field(default=DEFAULT_MAX_NESTED_ARRAYS)
    pool_cleaner_interval: int = Field(default=DEFAULT_POOL_CLEANER_INTERVAL)
    max_pool_size: int = Field(default=DEFAULT_MAX_POOL_SIZE)
    max_pool_waiting: int = Field(default=DEFAULT_MAX_POOL_WAITING)
    pool_recycle_timeout: int = Field(default=DEFAULT_POOL_RECYCLE_TIMEOUT)

    def to_options(self) -> RedisOptions:
        """Build `RedisOptions`; endpoints stay unset when not configured."""
        values = self.model_dump(exclude={"client_type", "endpoints"})
        options = RedisOptions(type=self.client_type, **values)
        if self.endpoints is not None:
            options.set_endpoints(list(self.endpoints))

        logger.debug(
            "Built Redis options from settings",
            client_type=options.type,
            endpoint=options.get_endpoint(),
            max_pool_size=options.max_pool_size,
        )
        return options
