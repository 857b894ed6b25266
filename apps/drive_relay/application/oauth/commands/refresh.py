"""TokenRefresh Command.

호출자가 가진 refresh token을 provider에 전달해 access token을 재발급받습니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.drive_relay.application.common.exceptions import MissingParameterError
from apps.drive_relay.application.oauth.dto import TokenRefreshResponse
from apps.drive_relay.application.oauth.exceptions import (
    OAuthNotConfiguredError,
    TokenEndpointError,
    TokenRefreshError,
)

if TYPE_CHECKING:
    from apps.drive_relay.application.oauth.ports import OAuthProviderGateway

logger = logging.getLogger(__name__)


class TokenRefreshInteractor:
    """토큰 재발급 Interactor (상태 없음)."""

    def __init__(self, provider: "OAuthProviderGateway") -> None:
        self._provider = provider

    async def execute(self, refresh_token: str | None) -> TokenRefreshResponse:
        """
        Raises:
            MissingParameterError: refresh_token 누락
            OAuthNotConfiguredError: provider 미설정
            TokenRefreshError: token endpoint 비정상 응답
        """
        if not refresh_token:
            raise MissingParameterError("Missing refresh_token")

        if not self._provider.is_configured():
            raise OAuthNotConfiguredError()

        try:
            tokens = await self._provider.refresh_access_token(refresh_token)
        except TokenEndpointError as e:
            logger.warning("Token refresh failed", extra={"status_code": e.status_code})
            raise TokenRefreshError(e.body) from e

        return TokenRefreshResponse(tokens=tokens)
