"""Callback Controller.

Google 리다이렉트를 받아 토큰을 교환하고 완료 페이지를 반환합니다.
"""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse

from apps.drive_relay.application.oauth.commands import OAuthCallbackInteractor
from apps.drive_relay.application.oauth.dto import OAuthCallbackRequest
from apps.drive_relay.setup.dependencies import get_oauth_callback_interactor

router = APIRouter()

SUCCESS_HTML = """<!DOCTYPE html><html><head><meta charset="utf-8"/><title>Success</title></head><body>
<p>Authentication complete. You can close this window.</p>
</body></html>"""


@router.get("/callback", response_class=HTMLResponse, summary="OAuth 콜백")
async def callback(
    code: str | None = Query(None, description="인증 코드"),
    state: str | None = Query(None, description="복합 state (sessionId:state)"),
    error: str | None = Query(None, description="provider 오류"),
    interactor: OAuthCallbackInteractor = Depends(get_oauth_callback_interactor),
) -> HTMLResponse:
    """토큰 교환 후 정적 완료 페이지를 반환합니다 (토큰은 페이지에 싣지 않음)."""
    await interactor.execute(OAuthCallbackRequest(code=code, state=state, error=error))
    return HTMLResponse(content=SUCCESS_HTML, status_code=200)
