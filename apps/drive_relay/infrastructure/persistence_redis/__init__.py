"""Redis persistence."""

from apps.drive_relay.infrastructure.persistence_redis.adapters import (
    RedisRateLimiter,
    RedisSessionStore,
)
from apps.drive_relay.infrastructure.persistence_redis.client import build_redis_client

__all__ = ["RedisRateLimiter", "RedisSessionStore", "build_redis_client"]
