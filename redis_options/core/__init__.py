"""Core module exports."""

from __future__ import annotations

from .enums import RedisClientType, RedisRole, RedisSlaves

__all__ = [
    "RedisClientType",
    "RedisRole",
    "RedisSlaves",
]
