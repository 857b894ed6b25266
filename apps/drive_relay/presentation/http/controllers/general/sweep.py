"""Sweep Controller.

외부 스케줄러(cron)가 호출하는 만료 항목 정리 엔드포인트입니다.
"""

from fastapi import APIRouter, Depends

from apps.drive_relay.application.oauth.ports import SessionStore
from apps.drive_relay.presentation.http.controllers.general.health import now_ms
from apps.drive_relay.presentation.http.schemas import SweepResponse
from apps.drive_relay.setup.dependencies import get_session_store

router = APIRouter()


@router.get("/cron/sweep", response_model=SweepResponse, summary="만료 세션 정리")
async def sweep(session_store: SessionStore = Depends(get_session_store)) -> SweepResponse:
    swept = await session_store.sweep()
    return SweepResponse(ts=now_ms(), swept=swept)
