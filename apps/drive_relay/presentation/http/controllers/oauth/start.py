"""Start Controller.

인증 세션 생성 및 Google 인증 URL 발급 엔드포인트입니다.
"""

from fastapi import APIRouter, Depends, Query

from apps.drive_relay.application.oauth.commands import OAuthStartInteractor
from apps.drive_relay.application.oauth.dto import OAuthStartRequest
from apps.drive_relay.presentation.http.schemas import StartResponse
from apps.drive_relay.setup.dependencies import get_oauth_start_interactor

router = APIRouter()


@router.get("/start", response_model=StartResponse, summary="OAuth 인증 시작")
async def start(
    redirect_to: str | None = Query(None, alias="redirectTo", description="결과에 실어 보낼 힌트"),
    interactor: OAuthStartInteractor = Depends(get_oauth_start_interactor),
) -> StartResponse:
    """인증 URL과 폴링용 sessionId를 발급합니다.

    클라이언트는 url을 외부 브라우저로 열고 sessionId로 /oauth/poll을 호출합니다.
    """
    result = await interactor.execute(OAuthStartRequest(redirect_to=redirect_to))
    return StartResponse(url=result.authorization_url, session_id=result.session_id)
