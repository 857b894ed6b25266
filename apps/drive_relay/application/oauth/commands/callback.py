"""OAuthCallback Command.

provider 리다이렉트를 받아 인증 코드를 토큰으로 교환하고
폴링 클라이언트가 가져갈 결과를 저장합니다.
"""

from __future__ import annotations

import logging
import secrets
import time
from typing import TYPE_CHECKING, Callable

from apps.drive_relay.application.common.exceptions import MissingParameterError
from apps.drive_relay.application.oauth.dto import OAuthCallbackRequest
from apps.drive_relay.application.oauth.exceptions import (
    InvalidStateError,
    OAuthDeniedError,
    OAuthNotConfiguredError,
    TokenEndpointError,
    TokenExchangeError,
)
from apps.drive_relay.domain.entities import OAuthResult
from apps.drive_relay.domain.exceptions import InvalidCompositeStateError
from apps.drive_relay.domain.value_objects import CompositeState

if TYPE_CHECKING:
    from apps.drive_relay.application.oauth.ports import OAuthProviderGateway, SessionStore

logger = logging.getLogger(__name__)


class OAuthCallbackInteractor:
    """OAuth 콜백 Interactor.

    Workflow:
        1. provider error 파라미터 확인 (세션 조회 없이 거부)
        2. code/state 필수 확인
        3. 복합 state 파싱 및 세션 조회, state 상수 시간 비교
        4. 코드 교환 (PKCE verifier 포함)
        5. 결과 저장 후 세션 삭제

    세션은 성공/실패 모두 삭제되므로 같은 세션으로 두 번 교환할 수 없습니다.
    """

    def __init__(
        self,
        session_store: "SessionStore",
        provider: "OAuthProviderGateway",
        result_ttl_seconds: int = 600,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._session_store = session_store
        self._provider = provider
        self._result_ttl_seconds = result_ttl_seconds
        self._clock = clock

    async def execute(self, request: OAuthCallbackRequest) -> None:
        """콜백을 처리합니다.

        Raises:
            OAuthDeniedError: provider가 error로 콜백
            MissingParameterError: code 또는 state 누락
            InvalidStateError: 세션 없음, 만료, state 불일치
            OAuthNotConfiguredError: provider 미설정
            TokenExchangeError: token endpoint 비정상 응답
        """
        if request.error:
            logger.warning("OAuth provider returned error", extra={"error": request.error})
            raise OAuthDeniedError(request.error)

        if not request.code or not request.state:
            raise MissingParameterError("Missing code or state")

        try:
            composite = CompositeState.parse(request.state)
        except InvalidCompositeStateError as e:
            raise InvalidStateError() from e

        session = await self._session_store.get_session(composite.session_id)
        if session is None or not secrets.compare_digest(
            session.state.encode("utf-8"), composite.state.encode("utf-8")
        ):
            logger.warning(
                "OAuth callback with unknown session or state mismatch",
                extra={"session_id": composite.session_id},
            )
            raise InvalidStateError()

        if not self._provider.is_configured():
            raise OAuthNotConfiguredError()

        try:
            tokens = await self._provider.exchange_code(
                code=request.code,
                code_verifier=session.code_verifier,
            )
        except TokenEndpointError as e:
            await self._session_store.delete_session(composite.session_id)
            logger.warning(
                "Token exchange failed",
                extra={"session_id": composite.session_id, "status_code": e.status_code},
            )
            raise TokenExchangeError(e.body) from e

        result = OAuthResult(
            tokens=tokens,
            redirect_to=session.redirect_to,
            created_at=self._clock(),
        )
        await self._session_store.save_result(
            composite.session_id, result, ttl_seconds=self._result_ttl_seconds
        )
        await self._session_store.delete_session(composite.session_id)

        logger.info(
            "OAuth token exchange completed",
            extra={"session_id": composite.session_id, "provider": session.provider},
        )
