"""Download Controller.

Drive 파일 본문을 상한 필터를 거쳐 스트리밍하는 엔드포인트입니다.
"""

import time

from fastapi import APIRouter, Depends, Request
from fastapi.responses import StreamingResponse

from apps.drive_relay.application.common.exceptions import ApplicationError
from apps.drive_relay.application.common.services import relay_limited
from apps.drive_relay.application.drive.queries import DownloadFileQuery
from apps.drive_relay.domain.exceptions import DomainError
from apps.drive_relay.presentation.http.utils.access_log import (
    SERVICE_DOWNLOAD,
    log_download,
    log_drive_failure,
)
from apps.drive_relay.presentation.http.utils.encoding import encode_uri_component
from apps.drive_relay.presentation.http.utils.rate_limit import rate_limited
from apps.drive_relay.setup.config import Settings, get_settings
from apps.drive_relay.setup.dependencies import get_download_file_query

router = APIRouter()

DOWNLOAD_CACHE_CONTROL = "public, max-age=3600"

download_rate_limit = rate_limited(
    "download",
    service=SERVICE_DOWNLOAD,
    action="DOWNLOAD",
    limit=lambda settings: settings.download_rate_limit,
)


@router.get(
    "/download/{file_id}",
    dependencies=[Depends(download_rate_limit)],
    summary="Drive 파일 다운로드",
)
async def download(
    file_id: str,
    request: Request,
    query: DownloadFileQuery = Depends(get_download_file_query),
    settings: Settings = Depends(get_settings),
) -> StreamingResponse:
    """파일 본문을 스트리밍합니다.

    선언 크기가 상한을 넘으면 413, 전송 중 상한을 넘으면 응답이 중단됩니다.
    """
    started = time.perf_counter()
    try:
        result = await query.execute(file_id)
    except (DomainError, ApplicationError) as exc:
        log_drive_failure(request, SERVICE_DOWNLOAD, file_id, exc, _elapsed_ms(started))
        raise

    info = result.info
    filename = encode_uri_component(info.name)
    headers = {
        "Content-Type": result.content_type,
        "Content-Disposition": f'attachment; filename="{filename}"',
        "Cache-Control": DOWNLOAD_CACHE_CONTROL,
        "X-File-Name": filename,
        "X-File-Size": str(info.size) if info.size is not None else "unknown",
        "X-File-Type": info.mime_type,
    }
    content_length = info.size if info.size is not None else result.stream.content_length
    if content_length is not None:
        headers["Content-Length"] = str(content_length)

    log_download(
        request,
        file_id,
        True,
        file_size=info.size,
        response_time_ms=_elapsed_ms(started),
    )

    return StreamingResponse(
        relay_limited(result.stream, settings.max_payload_bytes),
        headers=headers,
    )


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 1)
