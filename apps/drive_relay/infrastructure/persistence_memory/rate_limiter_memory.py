"""In-Memory Rate Limiter.

고정 윈도우 카운터. 윈도우는 키별 첫 요청 시각부터 시작합니다.
"""

from __future__ import annotations

import asyncio
import time
from typing import Callable

from apps.drive_relay.application.common.ports import RateLimiter, RateLimitStatus


class InMemoryRateLimiter(RateLimiter):
    """프로세스 메모리 기반 Rate Limiter."""

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._lock = asyncio.Lock()
        # key -> (count, reset_at)
        self._counters: dict[str, tuple[int, float]] = {}

    async def hit(self, key: str, limit: int, window_seconds: int) -> RateLimitStatus:
        async with self._lock:
            now = self._clock()
            count, reset_at = self._counters.get(key, (0, 0.0))

            if now >= reset_at:
                count, reset_at = 0, now + window_seconds
                self._purge(now)

            if count >= limit:
                return RateLimitStatus(
                    key=key, limit=limit, remaining=0, reset_at=reset_at, is_allowed=False
                )

            count += 1
            self._counters[key] = (count, reset_at)
            return RateLimitStatus(
                key=key,
                limit=limit,
                remaining=limit - count,
                reset_at=reset_at,
                is_allowed=True,
            )

    def _purge(self, now: float) -> None:
        expired = [key for key, (_, reset_at) in self._counters.items() if now >= reset_at]
        for key in expired:
            del self._counters[key]
