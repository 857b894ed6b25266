"""Rate Limiter Port.

클라이언트 IP 기준 고정 윈도우 요청 제한 추상화.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class RateLimitStatus:
    """Rate Limit 상태.

    Attributes:
        key: 카운터 키 (예: "rate_limit:download:1.2.3.4")
        limit: 윈도우당 최대 요청 수
        remaining: 남은 요청 수
        reset_at: 윈도우 리셋 시간 (Unix timestamp)
        is_allowed: 이번 요청 허용 여부
    """

    key: str
    limit: int
    remaining: int
    reset_at: float
    is_allowed: bool


class RateLimiter(ABC):
    """Rate Limiter 포트.

    구현체:
        - InMemoryRateLimiter (infrastructure/persistence_memory/)
        - RedisRateLimiter (infrastructure/persistence_redis/)
    """

    @abstractmethod
    async def hit(self, key: str, limit: int, window_seconds: int) -> RateLimitStatus:
        """요청 1건을 기록하고 허용 여부를 반환합니다.

        한도를 넘은 요청은 카운터를 올리지 않습니다.

        Args:
            key: 카운터 키
            limit: 윈도우당 최대 요청 수
            window_seconds: 윈도우 크기 (초)
        """
        pass
