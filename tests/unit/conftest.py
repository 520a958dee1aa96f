from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
import structlog

from redis_options import NetClientOptions, RedisClientType, RedisOptions, RedisRole, RedisSlaves


@pytest.fixture
def cluster_options() -> RedisOptions:
    """Options with every field moved away from its default."""
    return RedisOptions(
        type=RedisClientType.CLUSTER,
        net_client_options=NetClientOptions(tcp_keep_alive=False, connect_timeout=2500, ssl=True),
        endpoints=["redis://node1:7000", "redis://node2:7001", "redis://node3:7002"],
        max_waiting_handlers=4096,
        max_nested_arrays=8,
        master_name="cache",
        role=RedisRole.REPLICA,
        slaves=RedisSlaves.SHARE,
        pool_cleaner_interval=30_000,
        max_pool_size=6,
        max_pool_waiting=24,
        pool_recycle_timeout=60_000,
    )


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    level = root.level
    yield
    # drop the stdout handler installed by configure_logging, keep pytest capture handlers
    root.handlers = [h for h in root.handlers if type(h) is not logging.StreamHandler]
    root.setLevel(level)
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()
