from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_CONNECT_TIMEOUT = 60_000
DEFAULT_RECONNECT_INTERVAL = 1000


class NetClientOptions(BaseModel):
    """Transport level socket options embedded in ``RedisOptions``.

    Only the common TCP/TLS knobs are modelled. Any other key found while
    decoding is kept as-is and emitted again on serialization, so options
    understood by the transport but not by this package survive a round trip.
    """

    model_config = ConfigDict(
        extra="allow",
        validate_assignment=True,
        validate_by_name=True,
        validate_by_alias=True,
        serialize_by_alias=True,
    )

    tcp_keep_alive: bool = Field(default=False, alias="tcpKeepAlive", strict=True)
    tcp_no_delay: bool = Field(default=True, alias="tcpNoDelay", strict=True)
    connect_timeout: int = Field(
        default=DEFAULT_CONNECT_TIMEOUT,
        alias="connectTimeout",
        strict=True,
        description="Connect timeout in milliseconds",
    )
    idle_timeout: int = Field(default=0, alias="idleTimeout", strict=True, description="Idle timeout in seconds")
    reconnect_attempts: int = Field(default=0, alias="reconnectAttempts", strict=True)
    reconnect_interval: int = Field(
        default=DEFAULT_RECONNECT_INTERVAL,
        alias="reconnectInterval",
        strict=True,
        description="Delay between reconnect attempts in milliseconds",
    )
    ssl: bool = Field(default=False, alias="ssl", strict=True)
    trust_all: bool = Field(default=False, alias="trustAll", strict=True)

    def set_tcp_keep_alive(self, tcp_keep_alive: bool) -> Self:
        self.tcp_keep_alive = tcp_keep_alive
        return self

    def set_tcp_no_delay(self, tcp_no_delay: bool) -> Self:
        self.tcp_no_delay = tcp_no_delay
        return self

    def set_connect_timeout(self, connect_timeout: int) -> Self:
        self.connect_timeout = connect_timeout
        return self

    def set_idle_timeout(self, idle_timeout: int) -> Self:
        self.idle_timeout = idle_timeout
        return self

    def set_reconnect_attempts(self, reconnect_attempts: int) -> Self:
        self.reconnect_attempts = reconnect_attempts
        return self

    def set_reconnect_interval(self, reconnect_interval: int) -> Self:
        self.reconnect_interval = reconnect_interval
        return self

    def set_ssl(self, ssl: bool) -> Self:
        self.ssl = ssl
        return self

    def set_trust_all(self, trust_all: bool) -> Self:
        self.trust_all = trust_all
        return self
