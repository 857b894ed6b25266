"""Redis Rate Limiter Implementation.

고정 윈도우 카운터. INCR + EXPIRE를 Lua 스크립트로 원자적으로 처리합니다.

데이터 구조:
- rate_limit:{scope}:{ip} → String (윈도우 내 호출 카운트, TTL = 윈도우)
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from apps.drive_relay.application.common.ports import RateLimiter, RateLimitStatus

if TYPE_CHECKING:
    from redis.asyncio import Redis

logger = logging.getLogger(__name__)

HIT_SCRIPT = """
local counter_key = KEYS[1]
local limit = tonumber(ARGV[1])
local window_seconds = tonumber(ARGV[2])

local current = tonumber(redis.call('GET', counter_key) or '0')

if current >= limit then
    local ttl = redis.call('TTL', counter_key)
    if ttl < 0 then
        redis.call('EXPIRE', counter_key, window_seconds)
        ttl = window_seconds
    end
    return {0, current, ttl}
end

local new_count = redis.call('INCR', counter_key)
if new_count == 1 then
    redis.call('EXPIRE', counter_key, window_seconds)
end

return {1, new_count, redis.call('TTL', counter_key)}
"""


class RedisRateLimiter(RateLimiter):
    """Redis 기반 Rate Limiter (여러 인스턴스가 카운터 공유)."""

    def __init__(self, redis: "Redis") -> None:
        self._redis = redis

    async def hit(self, key: str, limit: int, window_seconds: int) -> RateLimitStatus:
        is_allowed, current, ttl = await self._redis.eval(
            HIT_SCRIPT,
            1,
            key,
            limit,
            window_seconds,
        )

        reset_at = time.time() + max(int(ttl), 0)
        status = RateLimitStatus(
            key=key,
            limit=limit,
            remaining=max(0, limit - int(current)),
            reset_at=reset_at,
            is_allowed=bool(is_allowed),
        )

        if not status.is_allowed:
            logger.warning(
                "Rate limit exceeded",
                extra={"key": key, "current": int(current), "limit": limit},
            )

        return status
