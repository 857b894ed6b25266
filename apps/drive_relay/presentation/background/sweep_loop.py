"""Sweep Loop.

메모리 세션 저장소의 만료 항목을 주기적으로 정리하는 백그라운드 태스크입니다.
Redis 백엔드는 TTL로 만료되므로 lifespan에서 시작하지 않습니다.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from apps.drive_relay.application.oauth.ports import SessionStore

logger = logging.getLogger(__name__)


class SweepLoop:
    """주기적 sweep 루프.

    한 번의 sweep 실패는 로그만 남기고 다음 주기에 다시 시도합니다.
    """

    def __init__(self, session_store: "SessionStore", *, interval: float = 60.0) -> None:
        self._session_store = session_store
        self._interval = interval
        self._shutdown = False
        self._swept_total = 0

    async def run(self) -> None:
        """메인 루프 실행 (stop() 또는 태스크 취소 시 종료)."""
        logger.info("Starting sweep loop", extra={"interval": self._interval})

        while not self._shutdown:
            await asyncio.sleep(self._interval)
            await self.run_once()

    async def run_once(self) -> int:
        """sweep 1회 실행.

        Returns:
            삭제된 항목 수 (실패 시 0)
        """
        try:
            removed = await self._session_store.sweep()
        except Exception:
            logger.exception("Sweep failed")
            return 0

        self._swept_total += removed
        if removed:
            logger.info(
                "Expired OAuth entries swept",
                extra={"removed": removed, "total_swept": self._swept_total},
            )
        return removed

    def stop(self) -> None:
        """루프 종료."""
        logger.info("Sweep loop stopping")
        self._shutdown = True
