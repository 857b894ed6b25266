"""TokenRefreshInteractor 단위 테스트."""

from unittest.mock import MagicMock

import pytest

from apps.drive_relay.application.common.exceptions import MissingParameterError
from apps.drive_relay.application.oauth.commands import TokenRefreshInteractor
from apps.drive_relay.application.oauth.exceptions import (
    OAuthNotConfiguredError,
    TokenEndpointError,
    TokenRefreshError,
)


class TestTokenRefreshInteractor:
    @pytest.fixture
    def interactor(self, mock_provider: MagicMock) -> TokenRefreshInteractor:
        return TokenRefreshInteractor(mock_provider)

    @pytest.mark.asyncio
    async def test_success(self, interactor: TokenRefreshInteractor, mock_provider: MagicMock) -> None:
        result = await interactor.execute("1//refresh")

        assert result.tokens == {"access_token": "ya29.new"}
        mock_provider.refresh_access_token.assert_awaited_once_with("1//refresh")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", [None, ""])
    async def test_missing_token(self, interactor: TokenRefreshInteractor, token) -> None:
        with pytest.raises(MissingParameterError):
            await interactor.execute(token)

    @pytest.mark.asyncio
    async def test_not_configured(
        self, interactor: TokenRefreshInteractor, mock_provider: MagicMock
    ) -> None:
        mock_provider.is_configured.return_value = False

        with pytest.raises(OAuthNotConfiguredError):
            await interactor.execute("1//refresh")

    @pytest.mark.asyncio
    async def test_provider_rejects(
        self, interactor: TokenRefreshInteractor, mock_provider: MagicMock
    ) -> None:
        mock_provider.refresh_access_token.side_effect = TokenEndpointError(400, "invalid_grant")

        with pytest.raises(TokenRefreshError) as exc_info:
            await interactor.execute("1//revoked")

        assert exc_info.value.message == "Refresh failed"
        assert exc_info.value.details == "invalid_grant"
