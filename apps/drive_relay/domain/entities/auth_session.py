"""OAuth Relay Entities.

인증 진행 중인 세션(AuthSession)과 교환 결과(OAuthResult)입니다.
두 엔티티 모두 SessionStore만 소유/변경합니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

GOOGLE_PROVIDER = "google"


@dataclass
class AuthSession:
    """진행 중인 인증 시도 1건.

    Attributes:
        state: callback에서 비교하는 anti-forgery 값
        code_verifier: PKCE verifier (authorization endpoint로 전송하지 않음)
        created_at: 생성 시각 (epoch seconds)
        redirect_to: 호출자가 넘긴 힌트, 결과에 그대로 실림
        provider: OAuth provider 태그
    """

    state: str
    code_verifier: str
    created_at: float
    redirect_to: str | None = None
    provider: str = GOOGLE_PROVIDER

    def to_dict(self) -> dict[str, Any]:
        return {
            "state": self.state,
            "code_verifier": self.code_verifier,
            "created_at": self.created_at,
            "redirect_to": self.redirect_to,
            "provider": self.provider,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AuthSession":
        return cls(
            state=data["state"],
            code_verifier=data["code_verifier"],
            created_at=float(data["created_at"]),
            redirect_to=data.get("redirect_to"),
            provider=data.get("provider", GOOGLE_PROVIDER),
        )


@dataclass
class OAuthResult:
    """토큰 교환 결과.

    tokens는 token endpoint 응답 원본이며 파싱하거나 수정하지 않습니다.
    """

    tokens: dict[str, Any] = field(default_factory=dict)
    redirect_to: str | None = None
    created_at: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "tokens": self.tokens,
            "redirect_to": self.redirect_to,
            "created_at": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "OAuthResult":
        return cls(
            tokens=dict(data.get("tokens") or {}),
            redirect_to=data.get("redirect_to"),
            created_at=float(data.get("created_at") or 0.0),
        )
