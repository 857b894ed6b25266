"""OAuthStart Command.

인증 세션 생성 및 authorization URL 발급 Use Case입니다.
"""

from __future__ import annotations

import logging
import secrets
import time
from typing import TYPE_CHECKING, Callable

from apps.drive_relay.application.oauth.dto import OAuthStartRequest, OAuthStartResponse
from apps.drive_relay.application.oauth.exceptions import OAuthNotConfiguredError
from apps.drive_relay.application.oauth.services import (
    generate_code_challenge,
    generate_code_verifier,
)
from apps.drive_relay.domain.entities import AuthSession
from apps.drive_relay.domain.value_objects import CompositeState

if TYPE_CHECKING:
    from apps.drive_relay.application.oauth.ports import OAuthProviderGateway, SessionStore

logger = logging.getLogger(__name__)

DEFAULT_SESSION_TTL_SECONDS = 600


class OAuthStartInteractor:
    """인증 시작 Interactor.

    Workflow:
        1. provider 설정 확인
        2. session_id, state 생성 (서로 독립된 128bit 난수)
        3. PKCE verifier/challenge 생성
        4. AuthSession 저장 (TTL)
        5. authorization URL 생성 (네트워크 호출 없음)
    """

    def __init__(
        self,
        session_store: "SessionStore",
        provider: "OAuthProviderGateway",
        session_ttl_seconds: int = DEFAULT_SESSION_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._session_store = session_store
        self._provider = provider
        self._session_ttl_seconds = session_ttl_seconds
        self._clock = clock

    async def execute(self, request: OAuthStartRequest) -> OAuthStartResponse:
        """인증 URL과 폴링용 session_id를 발급합니다.

        Raises:
            OAuthNotConfiguredError: client id 또는 callback 주소 미설정
        """
        if not self._provider.is_configured():
            raise OAuthNotConfiguredError()

        session_id = secrets.token_hex(16)
        state = secrets.token_hex(16)

        code_verifier = generate_code_verifier()
        code_challenge = generate_code_challenge(code_verifier)

        session = AuthSession(
            state=state,
            code_verifier=code_verifier,
            created_at=self._clock(),
            redirect_to=request.redirect_to,
        )
        await self._session_store.save_session(
            session_id, session, ttl_seconds=self._session_ttl_seconds
        )

        authorization_url = self._provider.build_authorization_url(
            state=CompositeState(session_id=session_id, state=state).encode(),
            code_challenge=code_challenge,
        )

        logger.info(
            "OAuth session started",
            extra={"session_id": session_id, "provider": session.provider},
        )

        return OAuthStartResponse(authorization_url=authorization_url, session_id=session_id)
