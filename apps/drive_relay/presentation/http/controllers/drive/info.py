"""Info Controller.

Drive 파일 메타데이터 조회 엔드포인트입니다.
"""

import time

from fastapi import APIRouter, Depends, Request, Response

from apps.drive_relay.application.common.exceptions import ApplicationError
from apps.drive_relay.application.drive.queries import GetFileInfoQuery
from apps.drive_relay.domain.exceptions import DomainError
from apps.drive_relay.presentation.http.schemas import FileInfoResponse
from apps.drive_relay.presentation.http.utils.access_log import (
    SERVICE_INFO,
    log_drive_failure,
    log_info,
)
from apps.drive_relay.presentation.http.utils.rate_limit import rate_limited
from apps.drive_relay.setup.dependencies import get_file_info_query

router = APIRouter()

INFO_CACHE_CONTROL = "public, max-age=300"

info_rate_limit = rate_limited(
    "info",
    service=SERVICE_INFO,
    action="GET_INFO",
    limit=lambda settings: settings.info_rate_limit,
)


@router.get(
    "/info/{file_id}",
    response_model=FileInfoResponse,
    dependencies=[Depends(info_rate_limit)],
    summary="Drive 파일 정보 조회",
)
async def get_info(
    file_id: str,
    request: Request,
    response: Response,
    query: GetFileInfoQuery = Depends(get_file_info_query),
) -> FileInfoResponse:
    """파일 메타데이터와 MIME 분류, 다운로드 경로를 반환합니다."""
    started = time.perf_counter()
    try:
        result = await query.execute(file_id)
    except (DomainError, ApplicationError) as exc:
        log_drive_failure(request, SERVICE_INFO, file_id, exc, _elapsed_ms(started))
        raise

    log_info(request, file_id, True, response_time_ms=_elapsed_ms(started))
    response.headers["Cache-Control"] = INFO_CACHE_CONTROL
    return FileInfoResponse.from_result(result)


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 1)
