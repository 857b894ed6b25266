"""Refresh Controller.

refresh token으로 Google access token을 재발급하는 엔드포인트입니다.
"""

from fastapi import APIRouter, Depends

from apps.drive_relay.application.oauth.commands import TokenRefreshInteractor
from apps.drive_relay.presentation.http.schemas import RefreshRequest, RefreshResponse
from apps.drive_relay.setup.dependencies import get_token_refresh_interactor

router = APIRouter()


@router.post("/refresh", response_model=RefreshResponse, summary="Google 토큰 재발급")
async def refresh(
    body: RefreshRequest | None = None,
    interactor: TokenRefreshInteractor = Depends(get_token_refresh_interactor),
) -> RefreshResponse:
    result = await interactor.execute(body.refresh_token if body else None)
    return RefreshResponse(tokens=result.tokens)
