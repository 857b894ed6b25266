"""OAuthPoll / OAuthFinal Commands.

폴링 클라이언트가 교환 결과를 한 번만 가져가도록 합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.drive_relay.application.common.exceptions import MissingParameterError
from apps.drive_relay.application.oauth.dto import OAuthPollResponse
from apps.drive_relay.application.oauth.exceptions import ResultNotFoundError
from apps.drive_relay.domain.entities import OAuthResult

if TYPE_CHECKING:
    from apps.drive_relay.application.oauth.ports import SessionStore

logger = logging.getLogger(__name__)


def _require_session_id(session_id: str | None) -> str:
    if not session_id:
        raise MissingParameterError("Missing sessionId")
    return session_id


class OAuthPollInteractor:
    """결과 폴링 Interactor.

    결과가 있으면 소비하여 반환(done=True), 없으면 세션 존재 여부만 알려줍니다.
    take가 경쟁에서 지면 결과가 없는 것으로 처리합니다.
    """

    def __init__(self, session_store: "SessionStore") -> None:
        self._session_store = session_store

    async def execute(self, session_id: str | None) -> OAuthPollResponse:
        session_id = _require_session_id(session_id)

        if await self._session_store.has_result(session_id):
            result = await self._session_store.take_result(session_id)
            if result is not None:
                logger.info("OAuth result delivered", extra={"session_id": session_id})
                return OAuthPollResponse(exists=True, done=True, result=result)

        if await self._session_store.get_session(session_id) is not None:
            return OAuthPollResponse(exists=True, done=False)

        return OAuthPollResponse(exists=False, done=False)


class OAuthFinalInteractor:
    """결과 직접 수령 Interactor."""

    def __init__(self, session_store: "SessionStore") -> None:
        self._session_store = session_store

    async def execute(self, session_id: str | None) -> OAuthResult:
        """
        Raises:
            MissingParameterError: sessionId 누락
            ResultNotFoundError: 결과 없음 (이미 수령했거나 만료)
        """
        session_id = _require_session_id(session_id)

        result = await self._session_store.take_result(session_id)
        if result is None:
            raise ResultNotFoundError()

        logger.info("OAuth result delivered", extra={"session_id": session_id})
        return result
