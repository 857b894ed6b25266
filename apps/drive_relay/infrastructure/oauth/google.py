"""Google OAuth Provider.

OAuthProviderGateway 포트의 구현체입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode

import httpx

from apps.drive_relay.application.oauth.exceptions import (
    OAuthProviderUnavailableError,
    TokenEndpointError,
)

if TYPE_CHECKING:
    from apps.drive_relay.setup.config import Settings

logger = logging.getLogger(__name__)

GOOGLE_AUTH_URL = "https://accounts.google.com/o/oauth2/v2/auth"
GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"
DEFAULT_SCOPES = (
    "https://www.googleapis.com/auth/spreadsheets.readonly",
    "https://www.googleapis.com/auth/drive.readonly",
)


class GoogleOAuthProvider:
    """Google OAuth 프로바이더 (PKCE S256, offline access)."""

    name = "google"

    def __init__(
        self,
        *,
        client: httpx.AsyncClient,
        client_id: str | None,
        client_secret: str | None,
        redirect_uri: str | None,
        scope: str | None = None,
    ) -> None:
        self._client = client
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self.scope = scope or " ".join(DEFAULT_SCOPES)

    @classmethod
    def from_settings(cls, settings: "Settings", client: httpx.AsyncClient) -> "GoogleOAuthProvider":
        return cls(
            client=client,
            client_id=settings.google_client_id,
            client_secret=settings.google_client_secret,
            redirect_uri=settings.google_redirect_uri,
            scope=settings.google_scope,
        )

    def is_configured(self) -> bool:
        return bool(self.client_id and self.redirect_uri)

    def build_authorization_url(self, *, state: str, code_challenge: str) -> str:
        params = {
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "response_type": "code",
            "scope": self.scope,
            "state": state,
            "code_challenge": code_challenge,
            "code_challenge_method": "S256",
            "access_type": "offline",
            "prompt": "consent",
        }
        return f"{GOOGLE_AUTH_URL}?{urlencode(params)}"

    async def exchange_code(self, *, code: str, code_verifier: str) -> dict[str, Any]:
        data = {
            "grant_type": "authorization_code",
            "client_id": self.client_id,
            "client_secret": self.client_secret or "",
            "redirect_uri": self.redirect_uri,
            "code": code,
            "code_verifier": code_verifier,
        }
        return await self._post_token(data)

    async def refresh_access_token(self, refresh_token: str) -> dict[str, Any]:
        data = {
            "grant_type": "refresh_token",
            "client_id": self.client_id,
            "client_secret": self.client_secret or "",
            "refresh_token": refresh_token,
        }
        return await self._post_token(data)

    async def _post_token(self, data: dict[str, Any]) -> dict[str, Any]:
        try:
            response = await self._client.post(GOOGLE_TOKEN_URL, data=data)
        except httpx.HTTPError as e:
            logger.warning("Google token request failed", extra={"error": str(e)})
            raise OAuthProviderUnavailableError(self.name, str(e)) from e

        if not response.is_success:
            logger.warning(
                "Google token endpoint error",
                extra={"status_code": response.status_code, "grant_type": data["grant_type"]},
            )
            raise TokenEndpointError(response.status_code, response.text)

        return response.json()
