from __future__ import annotations

from enum import StrEnum


class RedisClientType(StrEnum):
    """Connection topology the client should use."""

    STANDALONE = "STANDALONE"
    SENTINEL = "SENTINEL"
    CLUSTER = "CLUSTER"


class RedisRole(StrEnum):
    """Node role to resolve through sentinel (only considered in sentinel mode)."""

    MASTER = "MASTER"
    REPLICA = "REPLICA"


class RedisSlaves(StrEnum):
    """Read routing to replica nodes (only considered in cluster mode)."""

    NEVER = "NEVER"
    SHARE = "SHARE"
    ALWAYS = "ALWAYS"
