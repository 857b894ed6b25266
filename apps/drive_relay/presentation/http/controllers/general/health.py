"""Health Controller."""

import time

from fastapi import APIRouter

from apps.drive_relay.presentation.http.schemas import HealthResponse

router = APIRouter()


def now_ms() -> int:
    return int(time.time() * 1000)


@router.get("/health", response_model=HealthResponse, summary="헬스 체크")
async def health() -> HealthResponse:
    return HealthResponse(ts=now_ms())
