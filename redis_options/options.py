"""Redis client configuration.

This module provides the `RedisOptions` model describing how a client should
connect to Redis, how its connection pool is tuned and how much pipelined
backlog and reply nesting it tolerates.

- `RedisOptions`: the options value object
- `DEFAULT_ENDPOINT`: endpoint used whenever no endpoint was configured
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .core.enums import RedisClientType, RedisRole, RedisSlaves
from .exceptions import DecodeError
from .logger import get_logger
from .net import NetClientOptions

if TYPE_CHECKING:
    from structlog.stdlib import BoundLogger

logger: BoundLogger = get_logger(__name__)

DEFAULT_ENDPOINT = "redis://localhost:6379"
DEFAULT_MAX_WAITING_HANDLERS = 2048
DEFAULT_MAX_NESTED_ARRAYS = 32
DEFAULT_MASTER_NAME = "mymaster"
DEFAULT_POOL_CLEANER_INTERVAL = -1
DEFAULT_MAX_POOL_SIZE = 1
DEFAULT_MAX_POOL_WAITING = 1
DEFAULT_POOL_RECYCLE_TIMEOUT = 15_000


def _default_net_client_options() -> NetClientOptions:
    return NetClientOptions(tcp_keep_alive=True, tcp_no_delay=True)


class RedisOptions(BaseModel):
    """Redis client configuration options.

    Fields are plain attributes and can be assigned directly; every field also
    has a fluent ``set_*`` method returning the same instance so calls can be
    chained. Types are checked on assignment, ranges are not: consistency
    between settings (e.g. pool size vs. cluster members) is left to the
    consumer.

    Endpoints are lazy. ``endpoints`` stays ``None`` until set or read through
    `get_endpoints`, which stores ``[DEFAULT_ENDPOINT]`` on first read. Only
    cluster and sentinel modes use more than the first endpoint.

    Examples
    --------
    >>> options = (
    ...     RedisOptions()
    ...     .set_type(RedisClientType.CLUSTER)
    ...     .add_endpoint("redis://node1:7000")
    ...     .set_max_pool_size(8)
    ... )
    >>> options.get_endpoints()
    ['redis://localhost:6379', 'redis://node1:7000']
    >>> RedisOptions.from_json(options.to_json()) == options
    True
    """

    model_config = ConfigDict(
        extra="ignore",
        validate_assignment=True,
        validate_by_name=True,
        validate_by_alias=True,
        serialize_by_alias=True,
    )

    type: RedisClientType = Field(default=RedisClientType.STANDALONE, alias="type")
    net_client_options: NetClientOptions = Field(
        default_factory=_default_net_client_options,
        alias="netClientOptions",
    )
    endpoints: list[str] | None = Field(default=None, alias="endpoints")
    max_waiting_handlers: int = Field(
        default=DEFAULT_MAX_WAITING_HANDLERS,
        alias="maxWaitingHandlers",
        strict=True,
        description="Max queued reply handlers before backpressure applies",
    )
    max_nested_arrays: int = Field(
        default=DEFAULT_MAX_NESTED_ARRAYS,
        alias="maxNestedArrays",
        strict=True,
        description="Max nesting depth of arrays in a reply",
    )
    master_name: str = Field(default=DEFAULT_MASTER_NAME, alias="masterName", strict=True)
    role: RedisRole = Field(default=RedisRole.MASTER, alias="role")
    slaves: RedisSlaves = Field(default=RedisSlaves.NEVER, alias="slaves")
    pool_cleaner_interval: int = Field(
        default=DEFAULT_POOL_CLEANER_INTERVAL,
        alias="poolCleanerInterval",
        strict=True,
        description="Pool cleaner period in milliseconds (-1 disables it)",
    )
    max_pool_size: int = Field(default=DEFAULT_MAX_POOL_SIZE, alias="maxPoolSize", strict=True)
    max_pool_waiting: int = Field(default=DEFAULT_MAX_POOL_WAITING, alias="maxPoolWaiting", strict=True)
    pool_recycle_timeout: int = Field(
        default=DEFAULT_POOL_RECYCLE_TIMEOUT,
        alias="poolRecycleTimeout",
        strict=True,
        description="Idle age in milliseconds after which a pooled connection is recycled",
    )

    @classmethod
    def from_options(cls, other: RedisOptions, *, deep: bool = False) -> RedisOptions:
        """Copy another options object.

        Parameters
        ----------
        other : RedisOptions
            Options to copy.
        deep : bool
            When False (default) the endpoint list and net client options are
            shared with ``other``, so in-place changes through either object
            are visible through both. When True they are duplicated.

        Returns
        -------
        RedisOptions
            The copy.
        """
        return other.model_copy(deep=deep)

    @classmethod
    def from_json(cls, data: Mapping[str, Any] | str | bytes) -> Self:
        """Decode options from a JSON object or JSON document.

        Defaults are applied first and recognized keys overlay them. Keys are
        matched exactly against the serialized names (``maxPoolSize``, not
        ``max_pool_size``); anything else is ignored.

        Raises
        ------
        DecodeError
            If a recognized key holds a value of the wrong type or an unknown
            enum literal, or if the payload is not a JSON object.
        """
        try:
            if isinstance(data, str | bytes | bytearray):
                return cls.model_validate_json(data, by_alias=True, by_name=False)
            return cls.model_validate(data, by_alias=True, by_name=False)
        except ValidationError as e:
            error = e.errors()[0]
            key = str(error["loc"][0]) if error["loc"] else None
            logger.warning(
                "Failed to decode Redis options",
                key=key,
                error_type=error["type"],
                error_count=e.error_count(),
            )
            if key is None:
                raise DecodeError(f"Invalid Redis options: {error['msg']}") from e
            raise DecodeError(f"Invalid value for '{key}': {error['msg']}", key=key) from e

    def to_json(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict keyed by the serialized names.

        ``endpoints`` is left out while it has never been set or read.
        """
        exclude = {"endpoints"} if self.endpoints is None else None
        return self.model_dump(mode="json", by_alias=True, exclude=exclude)

    def to_json_string(self) -> str:
        exclude = {"endpoints"} if self.endpoints is None else None
        return self.model_dump_json(by_alias=True, exclude=exclude)

    def get_endpoints(self) -> list[str]:
        """Return the live endpoint list, storing the default one if none is set."""
        if self.endpoints is None:
            self.endpoints = [DEFAULT_ENDPOINT]
            logger.debug("Materialized default Redis endpoint", endpoint=DEFAULT_ENDPOINT)
        elif not self.endpoints:
            self.endpoints.append(DEFAULT_ENDPOINT)
            logger.debug("Materialized default Redis endpoint", endpoint=DEFAULT_ENDPOINT)
        return self.endpoints

    def get_endpoint(self) -> str:
        """Return the primary (first) endpoint without materializing the list."""
        if not self.endpoints:
            return DEFAULT_ENDPOINT
        return self.endpoints[0]

    def set_endpoints(self, endpoints: list[str] | None) -> Self:
        self.endpoints = endpoints
        return self

    def set_endpoint(self, endpoint: str) -> Self:
        """Replace all configured endpoints with ``endpoint``."""
        if self.endpoints is None:
            self.endpoints = [endpoint]
        else:
            # in place, copies sharing the list see the change
            self.endpoints.clear()
            self.endpoints.append(endpoint)
        return self

    def add_endpoint(self, endpoint: str) -> Self:
        """Append ``endpoint``, after the default one if nothing was configured."""
        self.get_endpoints().append(endpoint)
        return self

    def set_type(self, client_type: RedisClientType) -> Self:
        self.type = client_type
        return self

    def set_net_client_options(self, net_client_options: NetClientOptions) -> Self:
        self.net_client_options = net_client_options
        return self

    def set_max_waiting_handlers(self, max_waiting_handlers: int) -> Self:
        self.max_waiting_handlers = max_waiting_handlers
        return self

    def set_max_nested_arrays(self, max_nested_arrays: int) -> Self:
        self.max_nested_arrays = max_nested_arrays
        return self

    def set_master_name(self, master_name: str) -> Self:
        self.master_name = master_name
        return self

    def set_role(self, role: RedisRole) -> Self:
        self.role = role
        return self

    def set_use_slave(self, slaves: RedisSlaves) -> Self:
        self.slaves = slaves
        return self

    def set_pool_cleaner_interval(self, pool_cleaner_interval: int) -> Self:
        self.pool_cleaner_interval = pool_cleaner_interval
        return self

    def set_max_pool_size(self, max_pool_size: int) -> Self:
        """Set the pool size.

        With cluster or sentinel this should be at least the number of cluster
        members (or sentinels + 1).
        """
        self.max_pool_size = max_pool_size
        return self

    def set_max_pool_waiting(self, max_pool_waiting: int) -> Self:
        self.max_pool_waiting = max_pool_waiting
        return self

    def set_pool_recycle_timeout(self, pool_recycle_timeout: int) -> Self:
        self.pool_recycle_timeout = pool_recycle_timeout
        return self

    def get_connection_pool_kwargs(self) -> dict[str, Any]:
        """Get kwargs for redis.asyncio.ConnectionPool.from_url.

        Returns
        -------
        dict[str, Any]
            Kwargs ready for ``ConnectionPool.from_url(options.get_endpoint(), **kwargs)``.
        """
        net = self.net_client_options
        return {
            "max_connections": self.max_pool_size,
            "socket_keepalive": net.tcp_keep_alive,
            "socket_connect_timeout": net.connect_timeout / 1000,
        }
