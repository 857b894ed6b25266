"""Redis adapters."""

from apps.drive_relay.infrastructure.persistence_redis.adapters.rate_limiter_redis import (
    RedisRateLimiter,
)
from apps.drive_relay.infrastructure.persistence_redis.adapters.session_store_redis import (
    RedisSessionStore,
)

__all__ = ["RedisRateLimiter", "RedisSessionStore"]
