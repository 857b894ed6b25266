"""OAuth DTOs."""

from dataclasses import dataclass
from typing import Any

from apps.drive_relay.domain.entities import OAuthResult


@dataclass(frozen=True, slots=True)
class OAuthStartRequest:
    """인증 시작 요청."""

    redirect_to: str | None = None


@dataclass(frozen=True, slots=True)
class OAuthStartResponse:
    """인증 시작 응답."""

    authorization_url: str
    session_id: str


@dataclass(frozen=True, slots=True)
class OAuthCallbackRequest:
    """OAuth 콜백 요청."""

    code: str | None = None
    state: str | None = None
    error: str | None = None


@dataclass(frozen=True, slots=True)
class OAuthPollResponse:
    """폴링 응답.

    done=True 인 응답은 세션당 최대 한 번만 생성됩니다.
    """

    exists: bool
    done: bool
    result: OAuthResult | None = None


@dataclass(frozen=True, slots=True)
class TokenRefreshResponse:
    """토큰 재발급 응답."""

    tokens: dict[str, Any]
