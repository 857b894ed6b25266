"""Redis Session Store.

SessionStore 포트의 구현체입니다. 만료는 Redis TTL에 맡깁니다.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from apps.drive_relay.domain.entities import AuthSession, OAuthResult
from apps.drive_relay.infrastructure.persistence_redis.constants import (
    RESULT_KEY_PREFIX,
    SESSION_KEY_PREFIX,
)

if TYPE_CHECKING:
    import redis.asyncio as aioredis


class RedisSessionStore:
    """Redis 기반 세션/결과 저장소.

    take_result는 GETDEL 단일 명령으로 처리되어
    동시에 두 요청이 같은 결과를 받을 수 없습니다.
    """

    def __init__(self, redis: "aioredis.Redis") -> None:
        self._redis = redis

    async def save_session(
        self, session_id: str, session: AuthSession, ttl_seconds: int = 600
    ) -> None:
        key = f"{SESSION_KEY_PREFIX}{session_id}"
        await self._redis.setex(key, ttl_seconds, json.dumps(session.to_dict()))

    async def get_session(self, session_id: str) -> AuthSession | None:
        value = await self._redis.get(f"{SESSION_KEY_PREFIX}{session_id}")
        if not value:
            return None
        return AuthSession.from_dict(json.loads(value))

    async def delete_session(self, session_id: str) -> None:
        await self._redis.delete(f"{SESSION_KEY_PREFIX}{session_id}")

    async def save_result(
        self, session_id: str, result: OAuthResult, ttl_seconds: int = 600
    ) -> None:
        key = f"{RESULT_KEY_PREFIX}{session_id}"
        await self._redis.setex(key, ttl_seconds, json.dumps(result.to_dict()))

    async def has_result(self, session_id: str) -> bool:
        return bool(await self._redis.exists(f"{RESULT_KEY_PREFIX}{session_id}"))

    async def take_result(self, session_id: str) -> OAuthResult | None:
        value = await self._redis.getdel(f"{RESULT_KEY_PREFIX}{session_id}")
        if not value:
            return None
        return OAuthResult.from_dict(json.loads(value))

    async def sweep(self) -> int:
        """Redis TTL이 만료를 처리하므로 아무것도 하지 않습니다."""
        return 0
