"""Poll / Final Controllers.

폴링 클라이언트가 교환 결과를 한 번만 가져가는 엔드포인트입니다.
"""

from fastapi import APIRouter, Depends, Query

from apps.drive_relay.application.oauth.commands import OAuthFinalInteractor, OAuthPollInteractor
from apps.drive_relay.presentation.http.schemas import (
    FinalResponse,
    OAuthResultSchema,
    PollResponse,
)
from apps.drive_relay.setup.dependencies import (
    get_oauth_final_interactor,
    get_oauth_poll_interactor,
)

router = APIRouter()


@router.get(
    "/poll",
    response_model=PollResponse,
    response_model_exclude_none=True,
    summary="인증 결과 폴링",
)
async def poll(
    session_id: str | None = Query(None, alias="sessionId"),
    interactor: OAuthPollInteractor = Depends(get_oauth_poll_interactor),
) -> PollResponse:
    """결과가 있으면 소비하여 반환하고, 없으면 세션 존재 여부만 알려줍니다."""
    result = await interactor.execute(session_id)

    payload = None
    if result.result is not None:
        payload = OAuthResultSchema(
            tokens=result.result.tokens,
            redirect_to=result.result.redirect_to,
        )
    return PollResponse(exists=result.exists, done=result.done, result=payload)


@router.get(
    "/final",
    response_model=FinalResponse,
    response_model_exclude_none=True,
    summary="인증 결과 직접 수령",
)
async def final(
    session_id: str | None = Query(None, alias="sessionId"),
    interactor: OAuthFinalInteractor = Depends(get_oauth_final_interactor),
) -> FinalResponse:
    result = await interactor.execute(session_id)
    return FinalResponse(tokens=result.tokens, redirect_to=result.redirect_to)
