"""OAuth HTTP Schemas."""

from typing import Any

from pydantic import BaseModel, Field

from apps.drive_relay.presentation.http.schemas.base import CamelModel


class StartResponse(CamelModel):
    """인증 시작 응답."""

    url: str = Field(..., description="Google 인증 URL")
    session_id: str = Field(..., description="폴링용 세션 ID")


class OAuthResultSchema(CamelModel):
    """토큰 교환 결과."""

    tokens: dict[str, Any] = Field(..., description="token endpoint 응답 원본")
    redirect_to: str | None = Field(None, description="시작 시 전달한 redirectTo")


class PollResponse(CamelModel):
    """폴링 응답."""

    exists: bool = Field(..., description="세션 또는 결과 존재 여부")
    done: bool = Field(..., description="결과 수령 여부")
    result: OAuthResultSchema | None = Field(None, description="교환 결과 (done=true일 때)")


class FinalResponse(CamelModel):
    """결과 직접 수령 응답."""

    ok: bool = True
    tokens: dict[str, Any]
    redirect_to: str | None = None


class RefreshRequest(BaseModel):
    """토큰 재발급 요청."""

    refresh_token: str | None = Field(None, description="Google refresh token")


class RefreshResponse(BaseModel):
    """토큰 재발급 응답."""

    ok: bool = True
    tokens: dict[str, Any]
