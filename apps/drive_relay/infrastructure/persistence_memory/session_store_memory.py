"""In-Memory Session Store.

SessionStore 포트의 프로세스 메모리 구현체입니다.
물리적 삭제는 sweep()이 담당하고, 조회 시에는 만료 시각으로 논리적으로 판단합니다.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Callable, TypeVar

from apps.drive_relay.domain.entities import AuthSession, OAuthResult

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InMemorySessionStore:
    """asyncio.Lock으로 보호되는 dict 기반 저장소.

    값과 함께 만료 시각(expires_at)을 보관합니다.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._lock = asyncio.Lock()
        self._sessions: dict[str, tuple[AuthSession, float]] = {}
        self._results: dict[str, tuple[OAuthResult, float]] = {}

    def _live(self, entries: dict[str, tuple[T, float]], key: str) -> T | None:
        entry = entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self._clock() >= expires_at:
            return None
        return value

    async def save_session(
        self, session_id: str, session: AuthSession, ttl_seconds: int = 600
    ) -> None:
        async with self._lock:
            self._sessions[session_id] = (session, self._clock() + ttl_seconds)

    async def get_session(self, session_id: str) -> AuthSession | None:
        async with self._lock:
            return self._live(self._sessions, session_id)

    async def delete_session(self, session_id: str) -> None:
        async with self._lock:
            self._sessions.pop(session_id, None)

    async def save_result(
        self, session_id: str, result: OAuthResult, ttl_seconds: int = 600
    ) -> None:
        async with self._lock:
            self._results[session_id] = (result, self._clock() + ttl_seconds)

    async def has_result(self, session_id: str) -> bool:
        async with self._lock:
            return self._live(self._results, session_id) is not None

    async def take_result(self, session_id: str) -> OAuthResult | None:
        async with self._lock:
            result = self._live(self._results, session_id)
            self._results.pop(session_id, None)
            return result

    async def sweep(self) -> int:
        """만료된 세션과 결과를 삭제합니다."""
        async with self._lock:
            now = self._clock()
            removed = 0
            for entries in (self._sessions, self._results):
                expired = [key for key, (_, expires_at) in entries.items() if now >= expires_at]
                for key in expired:
                    del entries[key]
                removed += len(expired)

        if removed:
            logger.debug("Swept expired OAuth entries", extra={"removed": removed})
        return removed
