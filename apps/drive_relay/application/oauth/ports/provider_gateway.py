"""OAuthProviderGateway Port.

OAuth provider(Google)의 authorization/token endpoint와의 통신 인터페이스입니다.
"""

from __future__ import annotations

from typing import Any, Protocol


class OAuthProviderGateway(Protocol):
    """OAuth provider Gateway 인터페이스.

    구현체:
        - GoogleOAuthProvider (infrastructure/oauth/)
    """

    name: str

    def is_configured(self) -> bool:
        """client id와 callback 주소가 설정되어 있는지."""
        ...

    def build_authorization_url(self, *, state: str, code_challenge: str) -> str:
        """인증 URL 생성 (네트워크 호출 없음).

        Args:
            state: 복합 state 문자열 (sessionId:state)
            code_challenge: PKCE S256 challenge
        """
        ...

    async def exchange_code(self, *, code: str, code_verifier: str) -> dict[str, Any]:
        """인증 코드로 토큰 교환.

        Returns:
            token endpoint 응답 원본

        Raises:
            TokenEndpointError: 비정상 HTTP 응답
            OAuthProviderUnavailableError: 네트워크 오류
        """
        ...

    async def refresh_access_token(self, refresh_token: str) -> dict[str, Any]:
        """refresh token으로 access token 재발급.

        Raises:
            TokenEndpointError: 비정상 HTTP 응답
            OAuthProviderUnavailableError: 네트워크 오류
        """
        ...
