"""GoogleOAuthProvider 단위 테스트.

httpx.MockTransport로 토큰 엔드포인트를 대체합니다.
"""

from urllib.parse import parse_qs, urlparse

import httpx
import pytest

from apps.drive_relay.application.oauth.exceptions import (
    OAuthProviderUnavailableError,
    TokenEndpointError,
)
from apps.drive_relay.infrastructure.oauth import GoogleOAuthProvider
from apps.drive_relay.infrastructure.oauth.google import GOOGLE_TOKEN_URL


def _provider(client: httpx.AsyncClient, **overrides) -> GoogleOAuthProvider:
    kwargs = {
        "client": client,
        "client_id": "test-client-id",
        "client_secret": "test-client-secret",
        "redirect_uri": "http://testserver/oauth/callback",
    }
    kwargs.update(overrides)
    return GoogleOAuthProvider(**kwargs)


class TestConfiguration:
    def test_configured(self) -> None:
        assert _provider(httpx.AsyncClient()).is_configured() is True

    @pytest.mark.parametrize("missing", ["client_id", "redirect_uri"])
    def test_not_configured(self, missing: str) -> None:
        assert _provider(httpx.AsyncClient(), **{missing: None}).is_configured() is False

    def test_from_settings(self, settings) -> None:
        provider = GoogleOAuthProvider.from_settings(settings, httpx.AsyncClient())

        assert provider.client_id == "test-client-id"
        assert provider.redirect_uri == "http://testserver/oauth/callback"
        assert "drive.readonly" in provider.scope


class TestAuthorizationUrl:
    def test_contains_pkce_and_offline_params(self) -> None:
        """PKCE S256, offline access, consent 프롬프트 포함."""
        url = _provider(httpx.AsyncClient()).build_authorization_url(
            state="sid:state", code_challenge="challenge"
        )

        parsed = urlparse(url)
        params = {k: v[0] for k, v in parse_qs(parsed.query).items()}
        assert parsed.netloc == "accounts.google.com"
        assert params["client_id"] == "test-client-id"
        assert params["redirect_uri"] == "http://testserver/oauth/callback"
        assert params["response_type"] == "code"
        assert params["state"] == "sid:state"
        assert params["code_challenge"] == "challenge"
        assert params["code_challenge_method"] == "S256"
        assert params["access_type"] == "offline"
        assert params["prompt"] == "consent"
        assert "spreadsheets.readonly" in params["scope"]


class TestTokenEndpoint:
    @pytest.mark.asyncio
    async def test_exchange_code_posts_form(self, mock_http_client) -> None:
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, json={"access_token": "ya29.token"})

        tokens = await _provider(mock_http_client(handler)).exchange_code(
            code="auth-code", code_verifier="verifier"
        )

        assert tokens == {"access_token": "ya29.token"}
        request = captured[0]
        assert str(request.url) == GOOGLE_TOKEN_URL
        form = {k: v[0] for k, v in parse_qs(request.content.decode()).items()}
        assert form["grant_type"] == "authorization_code"
        assert form["code"] == "auth-code"
        assert form["code_verifier"] == "verifier"
        assert form["client_secret"] == "test-client-secret"

    @pytest.mark.asyncio
    async def test_refresh_posts_refresh_grant(self, mock_http_client) -> None:
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, json={"access_token": "ya29.new", "expires_in": 3599})

        tokens = await _provider(mock_http_client(handler)).refresh_access_token("1//refresh")

        assert tokens["access_token"] == "ya29.new"
        form = {k: v[0] for k, v in parse_qs(captured[0].content.decode()).items()}
        assert form["grant_type"] == "refresh_token"
        assert form["refresh_token"] == "1//refresh"

    @pytest.mark.asyncio
    async def test_error_status_raises_token_endpoint_error(self, mock_http_client) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, text='{"error": "invalid_grant"}')

        with pytest.raises(TokenEndpointError) as exc_info:
            await _provider(mock_http_client(handler)).exchange_code(
                code="bad", code_verifier="verifier"
            )

        assert exc_info.value.status_code == 400
        assert "invalid_grant" in exc_info.value.body

    @pytest.mark.asyncio
    async def test_network_error_raises_unavailable(self, mock_http_client) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(OAuthProviderUnavailableError):
            await _provider(mock_http_client(handler)).refresh_access_token("1//refresh")
