"""Redis Client Provider.

Retry 설정:
    - ExponentialBackoff: 지수 백오프 재시도
    - MAX_RETRIES: 3회 재시도
    - ConnectionError, TimeoutError에서 자동 재시도
    - health_check_interval: 30초마다 연결 상태 확인
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from redis.asyncio.retry import Retry
from redis.backoff import ExponentialBackoff
from redis.exceptions import ConnectionError, TimeoutError

if TYPE_CHECKING:
    import redis.asyncio as aioredis

HEALTH_CHECK_INTERVAL = 30  # seconds
MAX_CONNECTIONS = 20
SOCKET_CONNECT_TIMEOUT = 5.0  # seconds
SOCKET_TIMEOUT = 5.0  # seconds
RETRY_ON_ERROR = [ConnectionError, TimeoutError]
MAX_RETRIES = 3


def build_redis_client(redis_url: str) -> "aioredis.Redis":
    """비동기 Redis 클라이언트 생성.

    세션 저장소와 Rate Limiter가 같은 클라이언트를 공유합니다.
    """
    import redis.asyncio as aioredis

    retry = Retry(ExponentialBackoff(), retries=MAX_RETRIES)

    return aioredis.from_url(
        redis_url,
        encoding="utf-8",
        decode_responses=True,
        health_check_interval=HEALTH_CHECK_INTERVAL,
        socket_keepalive=True,
        socket_connect_timeout=SOCKET_CONNECT_TIMEOUT,
        socket_timeout=SOCKET_TIMEOUT,
        max_connections=MAX_CONNECTIONS,
        retry=retry,
        retry_on_error=RETRY_ON_ERROR,
    )
